"""Unit tests for service wiring in create_services."""

import pytest

from assetfs.core.config import AssetFSConfig, IncludesConfig, ScannerConfig
from assetfs.core.diagnostics import CollectingDiagnosticSink
from assetfs.core.extension_registry import Category, get_default_registry
from assetfs.services import create_services


def test_services_share_one_registry():
    services = create_services(config=AssetFSConfig(), diagnostics=CollectingDiagnosticSink())

    assert services.registry is get_default_registry()
    assert services.resolver.registry is services.registry
    assert services.classifier.registry is services.registry
    assert services.classifier.resolver is services.resolver


def test_services_share_one_sink():
    sink = CollectingDiagnosticSink()
    services = create_services(config=AssetFSConfig(), diagnostics=sink)

    services.resolver.extension("Makefile")
    services.scanner.list_files("/definitely/not/here")

    assert services.diagnostics is sink
    assert len(sink) == 2


def test_custom_categories_file(tmp_path):
    categories = tmp_path / "categories.yaml"
    categories.write_text(
        "supported:\n  image: ['.dds']\nnative:\n  texture: '.tex'\n", encoding="utf-8"
    )
    config = AssetFSConfig()
    config.registry.categories_file = str(categories)

    services = create_services(config=config, diagnostics=CollectingDiagnosticSink())

    assert services.registry.supported_extensions(Category.IMAGE) == (".dds",)
    assert services.resolver.nativize("sky.dds") == "sky.tex"


def test_malformed_categories_file_raises(tmp_path):
    categories = tmp_path / "categories.yaml"
    categories.write_text("supported: [unclosed\n", encoding="utf-8")
    config = AssetFSConfig()
    config.registry.categories_file = str(categories)

    with pytest.raises(ValueError):
        create_services(config=config, diagnostics=CollectingDiagnosticSink())


def test_scanner_uses_configured_ignore_patterns(tmp_path):
    (tmp_path / "keep.png").write_text("x", encoding="utf-8")
    (tmp_path / "drop.tmp").write_text("x", encoding="utf-8")
    config = AssetFSConfig(scanner=ScannerConfig(ignore_patterns=["*.tmp"]))

    services = create_services(config=config, diagnostics=CollectingDiagnosticSink())

    assert services.scanner.list_files(tmp_path) == [f"{tmp_path.as_posix()}/keep.png"]


def test_include_resolver_uses_configured_directive(tmp_path):
    (tmp_path / "main.css").write_text("@import 'base.css';\n", encoding="utf-8")
    (tmp_path / "base.css").write_text("", encoding="utf-8")
    config = AssetFSConfig(includes=IncludesConfig(directive="@import '", terminator="'"))

    services = create_services(config=config, diagnostics=CollectingDiagnosticSink())

    assert len(services.include_resolver.resolve_includes(tmp_path / "main.css")) == 1


def test_config_path_is_loaded(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"logging": {"level": "ERROR"}}', encoding="utf-8")

    services = create_services(config_path=path, diagnostics=CollectingDiagnosticSink())

    assert services.config.logging.level == "ERROR"

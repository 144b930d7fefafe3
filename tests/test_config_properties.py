"""
Property-based tests for AssetFSConfig round-trip serialization and
environment overrides.
"""

import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from assetfs.core.config import (
    AssetFSConfig,
    IncludesConfig,
    LoggingConfig,
    RegistryConfig,
    ScannerConfig,
    load_config,
)

# Strategies for generating valid configuration values
safe_text = st.text(
    alphabet=st.characters(
        whitelist_categories=("L", "N", "P", "S"),
        blacklist_characters="\x00\n\r\t",
    ),
    min_size=1,
    max_size=30,
).filter(lambda s: s.strip() != "")

ignore_pattern = st.from_regex(r"[a-zA-Z0-9_\-\*\./]+", fullmatch=True).filter(lambda s: len(s) > 0)

log_level = st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])


@st.composite
def config_strategy(draw):
    """Generate valid AssetFSConfig instances."""
    return AssetFSConfig(
        registry=RegistryConfig(
            categories_file=draw(st.sampled_from(["", "categories.yaml", "/etc/assetfs/c.yaml"]))
        ),
        scanner=ScannerConfig(ignore_patterns=draw(st.lists(ignore_pattern, max_size=5))),
        includes=IncludesConfig(
            directive=draw(safe_text),
            terminator=draw(safe_text),
            encoding=draw(st.sampled_from(["utf-8", "latin-1", "ascii"])),
        ),
        logging=LoggingConfig(level=draw(log_level), format=draw(safe_text)),
    )


@given(config=config_strategy(), suffix=st.sampled_from([".yaml", ".yml", ".json"]))
@settings(max_examples=100, deadline=None)
def test_config_round_trip(config, suffix):
    """Saving and loading a configuration yields an equal configuration."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / f"assetfs{suffix}"

        config.save(path)
        loaded = AssetFSConfig.from_file(path)

    assert loaded == config


def test_defaults_come_from_bundled_yaml():
    config = AssetFSConfig()

    assert config.registry.categories_file == ""
    assert config.scanner.ignore_patterns == []
    assert config.includes.directive == '#include "'
    assert config.includes.terminator == '"'
    assert config.includes.encoding == "utf-8"
    assert config.logging.level == "WARNING"


def test_default_lists_are_not_shared():
    first = AssetFSConfig()
    second = AssetFSConfig()

    first.scanner.ignore_patterns.append("*.tmp")

    assert second.scanner.ignore_patterns == []


def test_partial_file_keeps_other_defaults(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("scanner:\n  ignore_patterns: ['*.tmp']\n", encoding="utf-8")

    config = AssetFSConfig.from_file(path)

    assert config.scanner.ignore_patterns == ["*.tmp"]
    assert config.includes.directive == '#include "'


def test_empty_json_file(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("", encoding="utf-8")

    assert AssetFSConfig.from_file(path) == AssetFSConfig()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        AssetFSConfig.from_file(tmp_path / "absent.yaml")


def test_unsupported_suffix_raises(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValueError):
        AssetFSConfig.from_file(path)
    with pytest.raises(ValueError):
        AssetFSConfig().save(path)


def test_unknown_key_raises(tmp_path):
    path = tmp_path / "typo.yaml"
    path.write_text("includes:\n  directve: '@import'\n", encoding="utf-8")

    with pytest.raises(ValueError):
        AssetFSConfig.from_file(path)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ASSETFS_SCANNER_IGNORE_PATTERNS", "*.tmp, build/ ,")
    monkeypatch.setenv("ASSETFS_INCLUDES_DIRECTIVE", "@import '")
    monkeypatch.setenv("ASSETFS_LOGGING_LEVEL", "DEBUG")

    config = load_config()

    assert config.scanner.ignore_patterns == ["*.tmp", "build/"]
    assert config.includes.directive == "@import '"
    assert config.logging.level == "DEBUG"


def test_env_overrides_can_be_skipped(monkeypatch):
    monkeypatch.setenv("ASSETFS_LOGGING_LEVEL", "DEBUG")

    assert load_config(apply_env=False).logging.level == "WARNING"


def test_env_overrides_win_over_file(monkeypatch, tmp_path):
    path = tmp_path / "config.yaml"
    AssetFSConfig(logging=LoggingConfig(level="INFO")).save(path)
    monkeypatch.setenv("ASSETFS_LOGGING_LEVEL", "ERROR")

    assert load_config(path).logging.level == "ERROR"

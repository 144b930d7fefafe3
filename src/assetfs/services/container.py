"""
Centralized services container module for assetfs.

Provides a shared container for the path services used by the CLI and by
embedding applications, so that the extension registry is built once and
shared by reference.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from assetfs.core.classifier import Classifier
from assetfs.core.config import AssetFSConfig, load_config
from assetfs.core.diagnostics import DiagnosticSink, default_sink
from assetfs.core.directory_scanner import DirectoryScanner
from assetfs.core.extension_registry import ExtensionRegistry, get_default_registry
from assetfs.core.include_resolver import IncludeDependencyResolver
from assetfs.core.path_resolver import PathResolver


@dataclass
class ServicesContainer:
    """
    Container holding all shared service instances.

    Attributes:
        config: Application configuration
        registry: Immutable extension tables shared by every service
        resolver: Path decomposition and nativization
        classifier: Category predicates
        scanner: Directory listings
        include_resolver: Include dependency resolution
        diagnostics: Sink every service reports to
    """

    config: AssetFSConfig
    registry: ExtensionRegistry
    resolver: PathResolver
    classifier: Classifier
    scanner: DirectoryScanner
    include_resolver: IncludeDependencyResolver
    diagnostics: DiagnosticSink


def create_registry(config: AssetFSConfig) -> ExtensionRegistry:
    """
    Build the extension registry described by the configuration.

    Raises:
        ValueError: If a configured categories file is malformed
    """
    if config.registry.categories_file:
        return ExtensionRegistry.from_yaml(config.registry.categories_file)
    return get_default_registry()


def create_services(
    config_path: Optional[Path] = None,
    diagnostics: Optional[DiagnosticSink] = None,
    config: Optional[AssetFSConfig] = None,
) -> ServicesContainer:
    """
    Create and wire all services.

    Args:
        config_path: Optional path to configuration file. If None, uses
                    environment variables and defaults.
        diagnostics: Sink for reported conditions. If None, logs them.
        config: Already-loaded configuration; takes precedence over
               config_path.

    Returns:
        ServicesContainer with all initialized services.

    Raises:
        FileNotFoundError: If config_path does not exist.
        ValueError: If the configuration is invalid.
    """
    config = config or load_config(config_path)
    sink = diagnostics if diagnostics is not None else default_sink()

    registry = create_registry(config)
    resolver = PathResolver(registry=registry, diagnostics=sink)
    classifier = Classifier(resolver)
    scanner = DirectoryScanner(
        classifier=classifier,
        ignore_patterns=config.scanner.ignore_patterns,
        diagnostics=sink,
    )
    include_resolver = IncludeDependencyResolver(
        resolver=resolver,
        directive=config.includes.directive,
        terminator=config.includes.terminator,
        encoding=config.includes.encoding,
        diagnostics=sink,
    )

    return ServicesContainer(
        config=config,
        registry=registry,
        resolver=resolver,
        classifier=classifier,
        scanner=scanner,
        include_resolver=include_resolver,
        diagnostics=sink,
    )

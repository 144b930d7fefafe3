"""
Core Layer - Extension registry, path resolution, classification, directory
scanning and include resolution.
"""

from assetfs.core.classifier import Classifier
from assetfs.core.config import (
    AssetFSConfig,
    IncludesConfig,
    LoggingConfig,
    RegistryConfig,
    ScannerConfig,
    load_config,
)
from assetfs.core.diagnostics import (
    CollectingDiagnosticSink,
    Diagnostic,
    DiagnosticSink,
    LoggingDiagnosticSink,
)
from assetfs.core.directory_scanner import DirectoryScanner, DirectoryScannerInterface
from assetfs.core.extension_registry import (
    Category,
    ExtensionRegistry,
    NativeCategory,
    get_default_registry,
)
from assetfs.core.include_resolver import IncludeDependencyResolver
from assetfs.core.path_resolver import NATIVIZE_ORDER, PathParts, PathResolver
from assetfs.core.shell import open_directory_in_system_browser

__all__ = [
    # Config
    "AssetFSConfig",
    "RegistryConfig",
    "ScannerConfig",
    "IncludesConfig",
    "LoggingConfig",
    "load_config",
    # Diagnostics
    "Diagnostic",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "CollectingDiagnosticSink",
    # Registry
    "Category",
    "NativeCategory",
    "ExtensionRegistry",
    "get_default_registry",
    # Paths
    "PathParts",
    "PathResolver",
    "NATIVIZE_ORDER",
    "Classifier",
    # Entry points
    "DirectoryScanner",
    "DirectoryScannerInterface",
    "IncludeDependencyResolver",
    "open_directory_in_system_browser",
]

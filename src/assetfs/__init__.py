"""
assetfs - path normalization and asset classification.
"""

from assetfs.core import (
    AssetFSConfig,
    Category,
    Classifier,
    CollectingDiagnosticSink,
    DirectoryScanner,
    ExtensionRegistry,
    IncludeDependencyResolver,
    NativeCategory,
    PathResolver,
    load_config,
)
from assetfs.services import ServicesContainer, create_services

__version__ = "0.1.0"

__all__ = [
    "AssetFSConfig",
    "Category",
    "Classifier",
    "CollectingDiagnosticSink",
    "DirectoryScanner",
    "ExtensionRegistry",
    "IncludeDependencyResolver",
    "NativeCategory",
    "PathResolver",
    "ServicesContainer",
    "create_services",
    "load_config",
]

"""
DirectoryScanner module for assetfs.

Provides non-recursive directory listings with per-entry error
containment, separator normalization and category filtering.
"""

from .interfaces import DirectoryScannerInterface
from .scanner import DirectoryScanner

__all__ = [
    "DirectoryScanner",
    "DirectoryScannerInterface",
]

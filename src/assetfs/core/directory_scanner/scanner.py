"""
DirectoryScanner implementation for non-recursive directory listings.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterator

import pathspec

from assetfs.core.classifier import Classifier
from assetfs.core.diagnostics import DiagnosticSink, report
from assetfs.core.extension_registry import Category, NativeCategory
from assetfs.core.text_utils import normalize_separators

from .interfaces import DirectoryScannerInterface

logger = logging.getLogger(__name__)


def _printable(path: str) -> str:
    """Render a path that may carry undecodable bytes for diagnostics."""
    return path.encode("utf-8", "backslashreplace").decode("utf-8")


class DirectoryScanner(DirectoryScannerInterface):
    """
    Concrete implementation of DirectoryScannerInterface.

    Provides directory listings with:
    - Immediate children only (no recursion)
    - Per-entry error containment: a bad entry is reported and skipped
    - Forward-slash normalization of every returned path
    - Optional gitignore-style filtering of entry names
    - Category filtering through a Classifier
    """

    def __init__(
        self,
        classifier: Classifier | None = None,
        ignore_patterns: list[str] | None = None,
        diagnostics: DiagnosticSink | None = None,
    ):
        """
        Initialize the DirectoryScanner.

        Args:
            classifier: Classifier used by the filtered listings.
                       If None, one backed by the default registry is used.
            ignore_patterns: gitignore-style patterns matched against entry
                            names. If None, nothing is ignored.
            diagnostics: Sink for skipped entries. Defaults to the
                        classifier's sink.
        """
        self._classifier = classifier or Classifier()
        self._diagnostics = (
            diagnostics if diagnostics is not None else self._classifier.resolver.diagnostics
        )
        self._ignore_spec: pathspec.PathSpec | None = None
        self.set_ignore_patterns(ignore_patterns or [])

    @property
    def classifier(self) -> Classifier:
        return self._classifier

    def set_ignore_patterns(self, patterns: list[str]) -> None:
        """Set ignore patterns using gitignore syntax."""
        if not patterns:
            self._ignore_spec = None
            return
        self._ignore_spec = pathspec.PathSpec.from_lines(
            pathspec.patterns.GitWildMatchPattern, patterns
        )

    def _is_ignored(self, name: str, is_dir: bool) -> bool:
        if self._ignore_spec is None:
            return False
        if is_dir:
            return self._ignore_spec.match_file(name + "/") or self._ignore_spec.match_file(name)
        return self._ignore_spec.match_file(name)

    def list_directories(self, path: str | Path) -> list[str]:
        """List immediate subdirectories, forward-slashed."""
        return self._list(path, lambda entry: entry.is_dir(), is_dir=True)

    def list_files(self, path: str | Path) -> list[str]:
        """List immediate regular files, forward-slashed."""
        return self._list(path, lambda entry: entry.is_file(), is_dir=False)

    def _list(
        self,
        path: str | Path,
        predicate: Callable[[os.DirEntry], bool],
        is_dir: bool,
    ) -> list[str]:
        """
        Enumerate entries accepted by predicate.

        Args:
            path: Directory to list
            predicate: Entry type test (may raise OSError)
            is_dir: Whether directory ignore semantics apply

        Returns:
            Sorted, forward-slashed entry paths
        """
        root = os.fspath(path)
        try:
            scandir = os.scandir(root)
        except PermissionError as e:
            report(self._diagnostics, f"Permission denied accessing directory ({e.strerror})", root)
            return []
        except OSError as e:
            report(self._diagnostics, f"Error accessing directory ({e.strerror or e})", root)
            return []
        except ValueError as e:
            report(self._diagnostics, f"Invalid directory path ({e})", _printable(root))
            return []

        with scandir as iterator:
            entries = self._collect(iterator, root)

        results: list[str] = []
        for entry in entries:
            try:
                if not predicate(entry):
                    continue
                # Names the filesystem could not decode cannot be handed on.
                entry_path = entry.path
                entry_path.encode("utf-8")
            except UnicodeEncodeError as e:
                report(self._diagnostics, f"Failed to read an entry path ({e.reason})", _printable(entry.path))
                continue
            except OSError as e:
                report(self._diagnostics, f"Failed to read an entry ({e.strerror or e})", _printable(entry.path))
                continue

            if self._is_ignored(entry.name, is_dir):
                logger.debug(f"Ignoring: {entry_path}")
                continue

            results.append(normalize_separators(entry_path))

        return results

    def _collect(self, iterator: Iterator[os.DirEntry], root: str) -> list[os.DirEntry]:
        """Drain a directory iterator, keeping what was read before a failure."""
        entries: list[os.DirEntry] = []
        while True:
            try:
                entries.append(next(iterator))
            except StopIteration:
                break
            except OSError as e:
                report(self._diagnostics, f"Error reading directory ({e.strerror or e})", root)
                break
        return sorted(entries, key=lambda e: e.name)

    def list_supported_assets(self, path: str | Path) -> list[str]:
        """Supported images, then scripts, then models in a directory."""
        files = self.list_files(path)
        return (
            self._classifier.filter_by_category(files, Category.IMAGE)
            + self._classifier.filter_by_category(files, Category.SCRIPT)
            + self._classifier.filter_by_category(files, Category.MODEL)
        )

    def list_supported_models(self, path: str | Path) -> list[str]:
        return self._classifier.filter_by_category(self.list_files(path), Category.MODEL)

    def list_scene_files(self, path: str | Path) -> list[str]:
        """Engine world files in a directory."""
        return self._classifier.filter_engine_files(self.list_files(path), NativeCategory.WORLD)

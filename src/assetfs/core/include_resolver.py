"""
Recursive resolution of textual include directives.

A file such as a shader may pull in others with lines like

    #include "common/lighting.hlsl"

IncludeDependencyResolver turns that into a flat list of every file the
root depends on, directly or transitively.
"""

import logging
import os
from pathlib import Path

from .diagnostics import DiagnosticSink, report
from .path_resolver import PathResolver
from .text_utils import is_empty_or_whitespace, string_between

logger = logging.getLogger(__name__)

DEFAULT_DIRECTIVE = '#include "'
DEFAULT_TERMINATOR = '"'


class IncludeDependencyResolver:
    """
    Builds the ordered dependency list of a text file.

    Ordering: every direct include of the root file first (in line order,
    duplicates kept), then the flattened nested includes of the first
    direct include, then those of the second, and so on.

    Include names are resolved against the directory of the including
    file. A file that is already being expanded higher up the current
    include chain is not expanded again, which cuts include cycles without
    changing the result for acyclic graphs.
    """

    def __init__(
        self,
        resolver: PathResolver | None = None,
        directive: str = DEFAULT_DIRECTIVE,
        terminator: str = DEFAULT_TERMINATOR,
        encoding: str = "utf-8",
        diagnostics: DiagnosticSink | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            resolver: PathResolver used to find the including directory
            directive: Marker that starts an include name
            terminator: Delimiter that ends the include name
            encoding: Encoding used to read scanned files
            diagnostics: Sink for reported conditions; the resolver's if None
        """
        if not directive:
            raise ValueError("Include directive must not be empty")
        if not terminator:
            raise ValueError("Include terminator must not be empty")
        self._resolver = resolver or PathResolver()
        self._directive = directive
        self._terminator = terminator
        self._encoding = encoding
        self._diagnostics = diagnostics if diagnostics is not None else self._resolver.diagnostics

    @property
    def directive(self) -> str:
        return self._directive

    def resolve_includes(self, file_path: str | Path) -> list[str]:
        """
        Resolve all direct and nested includes of a file.

        Args:
            file_path: Root file to scan

        Returns:
            Dependency paths in discovery order; empty when the file is
            unreadable or has no includes
        """
        dependencies = self._resolve(os.fspath(file_path), in_progress=set())
        logger.debug(f"Resolved {len(dependencies)} includes for {file_path}")
        return dependencies

    def direct_includes(self, file_path: str | Path) -> list[str]:
        """
        Includes written in the file itself, without recursion.

        Args:
            file_path: File to scan

        Returns:
            Include paths prefixed with the file's directory, in line order
        """
        file_path = os.fspath(file_path)
        source = self._read(file_path)
        if source is None or self._directive not in source:
            return []

        directory = self._resolver.directory(file_path)
        includes: list[str] = []
        for line_number, line in enumerate(source.splitlines(), 1):
            if self._directive not in line:
                continue
            name = string_between(line, self._directive, self._terminator)
            if name is None:
                report(self._diagnostics, f"Unterminated include directive on line {line_number}", file_path)
                continue
            if is_empty_or_whitespace(name):
                report(self._diagnostics, f"Empty include directive on line {line_number}", file_path)
                continue
            includes.append(directory + name)
        return includes

    def _resolve(self, file_path: str, in_progress: set[str]) -> list[str]:
        key = _canonical(file_path)
        in_progress.add(key)
        try:
            direct = self.direct_includes(file_path)
            dependencies = list(direct)

            # Expand a snapshot so nested results never feed this loop.
            for dependency in list(direct):
                if _canonical(dependency) in in_progress:
                    report(self._diagnostics, f"Include cycle detected via {file_path}", dependency)
                    continue
                dependencies.extend(self._resolve(dependency, in_progress))
        finally:
            in_progress.discard(key)

        return dependencies

    def _read(self, file_path: str) -> str | None:
        """Full text of a file, or None if it cannot be read."""
        try:
            return Path(file_path).read_text(encoding=self._encoding)
        except UnicodeDecodeError as e:
            report(self._diagnostics, f"Failed to decode file as {self._encoding} ({e.reason})", file_path)
            return None
        except PermissionError:
            report(self._diagnostics, "Permission denied reading file", file_path)
            return None
        except OSError as e:
            report(self._diagnostics, f"Error reading file ({e.strerror or e})", file_path)
            return None
        except ValueError as e:
            report(self._diagnostics, f"Invalid file path ({e})", file_path)
            return None


def _canonical(file_path: str) -> str:
    """Key identifying a file regardless of how its path was spelled."""
    try:
        return os.path.normcase(os.path.realpath(file_path))
    except ValueError:
        # realpath rejects embedded NUL bytes
        return os.path.normcase(os.path.abspath(file_path))

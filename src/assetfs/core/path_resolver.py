"""
Path decomposition, relative paths and nativization.

Every operation here is total: malformed input produces an empty or
identity result and a diagnostic, never an exception.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import PurePath

from .diagnostics import DiagnosticSink, default_sink, report
from .extension_registry import Category, ExtensionRegistry, NativeCategory, get_default_registry
from .text_utils import extension_of, last_separator_index, normalize_separators, split_name

logger = logging.getLogger(__name__)

# First match wins; a path matching several categories takes the earliest.
NATIVIZE_ORDER: tuple[tuple[Category, NativeCategory], ...] = (
    (Category.AUDIO, NativeCategory.AUDIO),
    (Category.IMAGE, NativeCategory.TEXTURE),
    (Category.MODEL, NativeCategory.MODEL),
    (Category.FONT, NativeCategory.FONT),
    (Category.SHADER, NativeCategory.SHADER),
)


@dataclass(frozen=True)
class PathParts:
    """
    A path split into its components.

    Attributes:
        directory: Everything up to and including the last separator, or ''
        file_stem: File name without its final extension
        extension: Final extension including the dot, or ''
        is_absolute: Whether the original path was absolute
    """

    directory: str
    file_stem: str
    extension: str
    is_absolute: bool

    def reconstruct(self) -> str:
        return self.directory + self.file_stem + self.extension


class PathResolver:
    """
    Decomposes path strings and maps foreign asset paths to native ones.

    Both '/' and '\\' are treated as separators for decomposition.
    Relative path computation follows the PurePath flavour given at
    construction (the host flavour by default).
    """

    def __init__(
        self,
        registry: ExtensionRegistry | None = None,
        diagnostics: DiagnosticSink | None = None,
        path_flavour: type[PurePath] = PurePath,
    ):
        """
        Initialize the resolver.

        Args:
            registry: Extension tables; the default registry if None
            diagnostics: Sink for reported conditions; logging if None
            path_flavour: PurePath subclass used for root and component
                         handling (e.g. PureWindowsPath for drive roots)
        """
        self._registry = registry or get_default_registry()
        self._diagnostics = diagnostics if diagnostics is not None else default_sink()
        self._flavour = path_flavour

    @property
    def registry(self) -> ExtensionRegistry:
        return self._registry

    @property
    def diagnostics(self) -> DiagnosticSink:
        return self._diagnostics

    def file_name(self, path: str) -> str:
        """Last path component, or '' when the path ends in a separator or is empty."""
        path = str(path)
        name = split_name(path)
        if not name:
            report(self._diagnostics, "Path has no file name", path)
            return ""
        return name

    def file_stem(self, path: str) -> str:
        """File name with the final '.ext' removed, or '' when it has no '.'."""
        path = str(path)
        name = self.file_name(path)
        index = name.rfind(".")
        if index == -1:
            report(self._diagnostics, "Failed to extract file stem", path)
            return ""
        return name[:index]

    def directory(self, path: str) -> str:
        """Everything up to and including the last separator, or ''."""
        path = str(path)
        index = last_separator_index(path)
        if index == -1:
            report(self._diagnostics, "Failed to extract directory", path)
            return ""
        return path[: index + 1]

    def extension(self, path: str) -> str:
        """Final extension including the dot, or '' when there is none."""
        path = str(path)
        ext = extension_of(split_name(path))
        if not ext:
            report(self._diagnostics, "Path has no extension", path)
        return ext

    def path_without_extension(self, path: str) -> str:
        return self.directory(path) + self.file_stem(path)

    def is_absolute(self, path: str) -> bool:
        return self._flavour(str(path)).is_absolute()

    def decompose(self, path: str) -> PathParts:
        """
        Split a path into directory, stem, extension and absoluteness.

        Files without an extension keep their whole name as the stem so
        that reconstruct() still returns the original path.
        """
        path = str(path)
        directory = path[: last_separator_index(path) + 1]
        name = split_name(path)
        ext = extension_of(name)
        stem = name[: len(name) - len(ext)] if ext else name
        return PathParts(
            directory=directory,
            file_stem=stem,
            extension=ext,
            is_absolute=self.is_absolute(path),
        )

    def nativize(self, path: str) -> str:
        """
        Map a foreign asset path to its engine-native counterpart.

        Categories are tested in NATIVIZE_ORDER. When nothing matches the
        path is returned unchanged, so nativizing is idempotent.

        Args:
            path: Source asset path, e.g. 'sounds/hit.wav'

        Returns:
            e.g. 'sounds/hit.audio', or the input when no category matches
        """
        path = str(path)
        parts = self.decompose(path)
        for category, native in NATIVIZE_ORDER:
            if self._registry.matches_extension(parts.extension, category):
                return parts.directory + parts.file_stem + self._registry.native_extension_for(native)

        report(self._diagnostics, "Failed to nativize file path", path)
        return path

    def working_directory(self) -> str:
        return normalize_separators(os.getcwd())

    def parent_directory(self, path: str) -> str:
        """Parent of the path, forward-slashed ('' for a bare name)."""
        parent = self._flavour(str(path)).parent
        if str(parent) == ".":
            return ""
        return parent.as_posix()

    def root_directory(self, path: str) -> str:
        """Root separator of the path ('/' for absolute paths, '' otherwise)."""
        return normalize_separators(self._flavour(str(path)).root)

    def relative_path(self, path: str, base: str | None = None) -> str:
        """
        Express path relative to base.

        Relative input is returned unchanged. When the two paths live under
        different roots (e.g. drives C: and D:), no relative form exists and
        the absolute path is returned. Otherwise the result walks up from
        base with '..' to the point where the paths diverge, then down to
        path.

        Args:
            path: Path to express
            base: Reference directory; the working directory if None

        Returns:
            Forward-slashed relative path ('.' when both are equal)
        """
        target = self._flavour(str(path))
        if not target.is_absolute():
            return str(path)

        reference = self._absolute(base if base is not None else os.getcwd())

        if target.anchor != reference.anchor:
            logger.debug(f"No common root for {path} and {reference}, keeping absolute path")
            return target.as_posix()

        target_parts = _lexical_parts(target)
        reference_parts = _lexical_parts(reference)

        common = 0
        for mine, theirs in zip(target_parts, reference_parts):
            if mine != theirs:
                break
            common += 1

        segments = [".."] * (len(reference_parts) - common) + target_parts[common:]
        if not segments:
            return "."
        return "/".join(segments)

    def _absolute(self, path: str) -> PurePath:
        pure = self._flavour(str(path))
        if pure.is_absolute():
            return pure
        return self._flavour(os.getcwd()) / pure


def _lexical_parts(path: PurePath) -> list[str]:
    """Components after the anchor with '..' collapsed lexically."""
    parts: list[str] = []
    for part in path.parts[1:] if path.anchor else path.parts:
        if part == "..":
            if parts:
                parts.pop()
            continue
        parts.append(part)
    return parts

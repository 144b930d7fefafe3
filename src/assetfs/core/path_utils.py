"""
Filesystem helpers for assetfs.

Thin wrappers over os/shutil that report failures through a
DiagnosticSink and answer with a bool instead of raising.
"""

import logging
import os
import shutil
from pathlib import Path

from .diagnostics import DiagnosticSink, default_sink, report

logger = logging.getLogger(__name__)


def _sink(diagnostics: DiagnosticSink | None) -> DiagnosticSink:
    return diagnostics if diagnostics is not None else default_sink()


def create_directory(path: str | Path, diagnostics: DiagnosticSink | None = None) -> bool:
    """
    Create a directory and all missing parents.

    Returns:
        True if the directory was created, False if it already existed
        or creation failed
    """
    target = Path(path)
    if target.is_dir():
        return False
    try:
        target.mkdir(parents=True)
        return True
    except OSError as e:
        report(_sink(diagnostics), f"Failed to create directory ({e.strerror or e})", str(path))
        return False


def delete_directory(path: str | Path, diagnostics: DiagnosticSink | None = None) -> bool:
    """
    Delete a directory tree.

    Returns:
        True if something was removed
    """
    target = Path(path)
    if not target.exists():
        return False
    try:
        shutil.rmtree(target)
        return True
    except OSError as e:
        report(_sink(diagnostics), f"Failed to delete directory ({e.strerror or e})", str(path))
        return False


def exists(path: str | Path, diagnostics: DiagnosticSink | None = None) -> bool:
    try:
        return os.path.exists(path)
    except (OSError, ValueError) as e:
        report(_sink(diagnostics), f"Failed to check existence ({e})", str(path))
        return False


def is_file(path: str | Path, diagnostics: DiagnosticSink | None = None) -> bool:
    try:
        return Path(path).is_file()
    except (OSError, ValueError) as e:
        report(_sink(diagnostics), f"Failed to check file ({e})", str(path))
        return False


def is_directory(path: str | Path, diagnostics: DiagnosticSink | None = None) -> bool:
    try:
        return Path(path).is_dir()
    except (OSError, ValueError) as e:
        report(_sink(diagnostics), f"Failed to check directory ({e})", str(path))
        return False


def delete_file(path: str | Path, diagnostics: DiagnosticSink | None = None) -> bool:
    """
    Delete a single file. Directories are refused.

    Returns:
        True if the file was removed
    """
    if is_directory(path, diagnostics):
        return False
    try:
        os.remove(path)
        return True
    except OSError as e:
        report(_sink(diagnostics), f"Failed to delete file ({e.strerror or e})", str(path))
        return False


def copy_file(
    source: str | Path,
    destination: str | Path,
    diagnostics: DiagnosticSink | None = None,
) -> bool:
    """
    Copy a file, overwriting the destination.

    The destination directory is created when missing. Copying a file
    onto itself is a no-op that succeeds.

    Returns:
        True on success
    """
    if os.fspath(source) == os.fspath(destination):
        return True

    parent = Path(destination).parent
    if not parent.exists():
        create_directory(parent, diagnostics)

    try:
        shutil.copyfile(source, destination)
        logger.debug(f"Copied {source} to {destination}")
        return True
    except OSError as e:
        report(_sink(diagnostics), f"Failed to copy file to {destination} ({e.strerror or e})", str(source))
        return False

"""
Abstract interfaces for directory listing operations.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class DirectoryScannerInterface(ABC):
    """
    Abstract interface for directory listing.

    Implementations enumerate immediate children only and never fail as a
    whole because of a single bad entry.
    """

    @abstractmethod
    def list_directories(self, path: str | Path) -> list[str]:
        """
        List the subdirectories of a directory.

        Args:
            path: Directory to list

        Returns:
            Forward-slashed paths of the immediate subdirectories

        Notes:
            - Entries that cannot be read are skipped and reported
            - A missing root yields an empty list
        """
        pass

    @abstractmethod
    def list_files(self, path: str | Path) -> list[str]:
        """
        List the regular files of a directory.

        Args:
            path: Directory to list

        Returns:
            Forward-slashed paths of the immediate files
        """
        pass

    @abstractmethod
    def set_ignore_patterns(self, patterns: list[str]) -> None:
        """
        Set ignore patterns using gitignore syntax.

        Args:
            patterns: List of gitignore-style patterns matched on entry names
        """
        pass

"""
Diagnostic reporting for degrade-and-continue conditions.

Path utilities never raise on malformed input or per-entry I/O failures.
Instead they return a best-effort value and report what went wrong to an
injected DiagnosticSink.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """
    A single reported condition.

    Attributes:
        message: Human-readable description of the condition
        path: The offending path, if one is involved
    """

    message: str
    path: str | None = None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


class DiagnosticSink(ABC):
    """Receiver for warnings emitted by the path service."""

    @abstractmethod
    def warning(self, message: str, path: str | None = None) -> None:
        """
        Record a recoverable condition.

        Args:
            message: Description of the condition
            path: The offending path, if any
        """
        pass


class LoggingDiagnosticSink(DiagnosticSink):
    """Forwards diagnostics to a standard library logger at WARNING level."""

    def __init__(self, target: logging.Logger | None = None):
        self._logger = target or logging.getLogger("assetfs")

    def warning(self, message: str, path: str | None = None) -> None:
        self._logger.warning(str(Diagnostic(message, path)), extra={"asset_path": path})


class CollectingDiagnosticSink(DiagnosticSink):
    """
    Keeps diagnostics in memory.

    Used by the CLI to summarize what happened during a command, and by
    tests to assert on reported conditions.
    """

    def __init__(self, forward_to: DiagnosticSink | None = None):
        """
        Args:
            forward_to: Optional sink that also receives every diagnostic
        """
        self._diagnostics: list[Diagnostic] = []
        self._forward_to = forward_to

    def warning(self, message: str, path: str | None = None) -> None:
        self._diagnostics.append(Diagnostic(message, path))
        if self._forward_to is not None:
            report(self._forward_to, message, path)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def messages(self) -> list[str]:
        return [d.message for d in self._diagnostics]

    def clear(self) -> None:
        self._diagnostics.clear()

    def __len__(self) -> int:
        return len(self._diagnostics)


def report(sink: DiagnosticSink, message: str, path: str | None = None) -> None:
    """
    Emit a diagnostic without letting a failing sink reach the caller.

    Args:
        sink: Destination sink
        message: Description of the condition
        path: The offending path, if any
    """
    try:
        sink.warning(message, path)
    except Exception as e:
        logger.debug(f"Diagnostic sink {type(sink).__name__} failed: {e}", exc_info=True)


def default_sink() -> DiagnosticSink:
    """Get a sink that writes to the 'assetfs' logger."""
    return LoggingDiagnosticSink()

"""
Host shell integration.
"""

import logging
import platform
import subprocess
from pathlib import Path

from .diagnostics import DiagnosticSink, default_sink, report

logger = logging.getLogger(__name__)


def open_directory_in_system_browser(path: str | Path, diagnostics: DiagnosticSink | None = None) -> None:
    """
    Open a directory in the platform's file browser.

    Fire-and-forget: the browser process is not waited on. A missing
    launcher is reported, not raised.
    """
    folder = str(path)
    system = platform.system()
    if system == "Darwin":
        command = ["open", folder]
    elif system == "Windows":
        command = ["explorer", folder]
    else:
        command = ["xdg-open", folder]

    try:
        subprocess.Popen(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        logger.debug(f"Launched {command[0]} for {folder}")
    except OSError as e:
        message = f"Failed to open directory with {command[0]} ({e.strerror or e})"
        report(diagnostics if diagnostics is not None else default_sink(), message, folder)

"""
File event logger.

Appends event messages to a text file. If the file cannot be opened or
a write fails, the remaining messages are discarded without raising.
"""

import logging
from pathlib import Path
from typing import Optional, TextIO

from appliancectl.sinks.base import EventLogger

logger = logging.getLogger(__name__)


class FileLogger(EventLogger):
    """Event logger that appends to a log file."""

    PREFIX = "[File] "

    def __init__(self, log_path: Path):
        """
        Initialize file logger and open the log file for appending.

        Args:
            log_path: Path to the event log file
        """
        self.log_path = log_path
        self._file_handle: Optional[TextIO] = None

        try:
            self._file_handle = open(self.log_path, "a", encoding="utf-8")
        except OSError as e:
            logger.debug(f"Cannot open event log {self.log_path}: {e}")

    @property
    def is_open(self) -> bool:
        """Check whether messages are being written."""
        return self._file_handle is not None

    def log(self, message: str) -> None:
        """Append message with file prefix."""
        if not self._file_handle:
            return

        try:
            self._file_handle.write(f"{self.PREFIX}{message}\n")
            self._file_handle.flush()
        except OSError as e:
            logger.debug(f"Cannot write event log {self.log_path}: {e}")
            self._close_handle()

    def _close_handle(self) -> None:
        """Close and drop the file handle, ignoring close errors."""
        handle = self._file_handle
        self._file_handle = None
        try:
            handle.close()
        except OSError as e:
            logger.debug(f"Cannot close event log {self.log_path}: {e}")

    def close(self) -> None:
        """Close the log file."""
        if self._file_handle:
            self._close_handle()

    def __enter__(self) -> "FileLogger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

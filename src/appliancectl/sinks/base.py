"""
Base classes for event loggers.

Defines abstract interface and factory for event logging sinks.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FILE = Path("log.txt")


class LoggerType(Enum):
    """Event logger type values."""

    CONSOLE = "console"
    FILE = "file"


class EventLogger(ABC):
    """Abstract base class for event loggers."""

    @abstractmethod
    def log(self, message: str) -> None:
        """
        Record a message.

        Args:
            message: Human-readable event text
        """
        pass

    def close(self) -> None:
        """Clean up logger resources."""
        pass


def create_logger(
    logger_type: Union[LoggerType, str],
    log_file: Path = DEFAULT_LOG_FILE,
) -> Optional[EventLogger]:
    """
    Factory function to create an event logger.

    Args:
        logger_type: Type of logger (console, file) as enum or string value
        log_file: Path used by the file logger

    Returns:
        EventLogger subclass instance, or None if logger_type is unknown
    """
    if isinstance(logger_type, str):
        try:
            logger_type = LoggerType(logger_type)
        except ValueError:
            return None

    if logger_type == LoggerType.CONSOLE:
        from appliancectl.sinks.console import ConsoleLogger
        return ConsoleLogger()

    elif logger_type == LoggerType.FILE:
        from appliancectl.sinks.file import FileLogger
        return FileLogger(Path(log_file))

    else:
        return None

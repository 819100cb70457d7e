"""
Event logging sinks for appliance controller.

Provides console and append-only file loggers for device events.
"""

from appliancectl.sinks.base import (
    DEFAULT_LOG_FILE,
    EventLogger,
    LoggerType,
    create_logger,
)

__all__ = [
    "DEFAULT_LOG_FILE",
    "EventLogger",
    "LoggerType",
    "create_logger",
]

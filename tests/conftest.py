"""Shared fixtures for appliancectl tests."""

import pytest

from appliancectl.sinks.base import EventLogger


class RecordingLogger(EventLogger):
    """Event logger that keeps messages in memory."""

    def __init__(self):
        self.messages: list[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def event_logger():
    """Create an in-memory event logger."""
    return RecordingLogger()

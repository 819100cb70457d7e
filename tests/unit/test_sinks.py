"""Unit tests for event logging sinks."""

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from appliancectl.core.manager import DeviceManager
from appliancectl.devices.factory import create_drill
from appliancectl.sinks.base import DEFAULT_LOG_FILE, EventLogger, LoggerType, create_logger
from appliancectl.sinks.console import ConsoleLogger
from appliancectl.sinks.file import FileLogger


class TestLoggerType:
    """Tests for LoggerType enum."""

    def test_logger_types(self):
        """Test logger type values."""
        assert LoggerType.CONSOLE.value == "console"
        assert LoggerType.FILE.value == "file"


class TestCreateLogger:
    """Tests for logger factory function."""

    def test_create_console_logger(self):
        """Test creating console logger."""
        event_logger = create_logger(LoggerType.CONSOLE)
        assert isinstance(event_logger, ConsoleLogger)
        assert isinstance(event_logger, EventLogger)

    def test_create_file_logger(self, tmp_path):
        """Test creating file logger with custom path."""
        log_file = tmp_path / "events.txt"
        event_logger = create_logger(LoggerType.FILE, log_file)
        try:
            assert isinstance(event_logger, FileLogger)
            assert event_logger.log_path == log_file
        finally:
            event_logger.close()

    def test_create_file_logger_default_path(self, tmp_path, monkeypatch):
        """Test file logger defaults to log.txt in working directory."""
        monkeypatch.chdir(tmp_path)
        event_logger = create_logger(LoggerType.FILE)
        try:
            assert event_logger.log_path == DEFAULT_LOG_FILE
            assert (tmp_path / "log.txt").exists()
        finally:
            event_logger.close()

    def test_create_from_string(self):
        """Test creating logger from string value."""
        assert isinstance(create_logger("console"), ConsoleLogger)

    def test_unknown_type_returns_none(self):
        """Test unknown logger type yields no logger."""
        assert create_logger("syslog") is None
        assert create_logger(42) is None


class TestConsoleLogger:
    """Tests for console logger."""

    def test_log_prefix(self, capsys):
        """Test message is printed with console prefix."""
        ConsoleLogger().log("hello")
        assert capsys.readouterr().out == "[Console] hello\n"

    def test_log_unicode(self, capsys):
        """Test non-ASCII messages are printed intact."""
        ConsoleLogger().log("Включено: Drill")
        assert capsys.readouterr().out == "[Console] Включено: Drill\n"


class TestFileLogger:
    """Tests for file logger."""

    def test_log_appends(self, tmp_path):
        """Test messages are appended with file prefix."""
        log_file = tmp_path / "log.txt"
        log_file.write_text("existing\n")

        with FileLogger(log_file) as event_logger:
            event_logger.log("first")
            event_logger.log("Добавлено устройство: X")

        assert log_file.read_text(encoding="utf-8") == (
            "existing\n[File] first\n[File] Добавлено устройство: X\n"
        )

    def test_unopenable_file_is_silent(self, tmp_path):
        """Test logging to an unopenable path discards messages."""
        log_file = tmp_path / "missing-dir" / "log.txt"
        event_logger = FileLogger(log_file)

        assert event_logger.is_open is False
        event_logger.log("dropped")
        event_logger.close()
        assert not log_file.exists()

    def test_open_error_is_silent(self, tmp_path):
        """Test OSError from open is swallowed."""
        with patch("builtins.open", side_effect=PermissionError("denied")):
            event_logger = FileLogger(tmp_path / "log.txt")

        assert event_logger.is_open is False
        event_logger.log("dropped")

    def test_log_after_close_discarded(self, tmp_path):
        """Test messages after close are ignored."""
        log_file = tmp_path / "log.txt"
        event_logger = FileLogger(log_file)
        event_logger.log("kept")
        event_logger.close()
        event_logger.log("dropped")

        assert log_file.read_text(encoding="utf-8") == "[File] kept\n"

    def test_write_error_is_silent(self, tmp_path):
        """Test OSError from write is swallowed and later messages dropped."""
        event_logger = FileLogger(tmp_path / "log.txt")
        event_logger._file_handle.close()
        handle = MagicMock()
        handle.write.side_effect = OSError(28, "No space left on device")
        event_logger._file_handle = handle

        event_logger.log("dropped")
        event_logger.log("also dropped")

        assert event_logger.is_open is False
        handle.write.assert_called_once()
        handle.close.assert_called_once()

    def test_flush_error_is_silent(self, tmp_path):
        """Test OSError from flush and from the following close is swallowed."""
        event_logger = FileLogger(tmp_path / "log.txt")
        event_logger._file_handle.close()
        handle = MagicMock()
        handle.flush.side_effect = OSError(28, "No space left on device")
        handle.close.side_effect = OSError(28, "No space left on device")
        event_logger._file_handle = handle

        event_logger.log("dropped")
        event_logger.close()

        assert event_logger.is_open is False

    @pytest.mark.skipif(not os.path.exists("/dev/full"), reason="requires /dev/full")
    def test_full_device_keeps_registry_working(self):
        """Test a device is registered even when the event log cannot be written."""
        event_logger = FileLogger(Path("/dev/full"))
        manager = DeviceManager(event_logger)

        manager.add_device(create_drill())
        manager.turn_on_all()
        event_logger.close()

        assert len(manager) == 1
        assert manager.get_total_power() == 800

"""Tests for logging configuration."""

import logging
import logging.handlers
from pathlib import Path

import pytest

pytestmark = pytest.mark.usefixtures("qapp", "restore_logging")


def make_record(message: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("isomap.test", level, __file__, 42, message, None, None)


class TestFormatters:
    """Test the console and file formatters."""

    def test_colored_formatter(self) -> None:
        """Test only the level name gets an ANSI colour."""
        from isomap.utils.logging_config import ColoredFormatter

        formatter = ColoredFormatter(fmt="%(levelname)s : %(message)s")
        output = formatter.format(make_record("hello", logging.WARNING))
        assert output == "\033[33mWARNING\033[0m : hello"

    def test_csv_formatter_escapes_quotes(self) -> None:
        """Test CSV output quotes fields and doubles embedded quotes."""
        from isomap.utils.logging_config import CSVFormatter

        output = CSVFormatter(datefmt="%Y").format(make_record('tile "7" missing'))
        fields = output.split(";")
        assert fields[1].strip() == "INFO"
        assert fields[3] == '"isomap.test"'
        assert fields[4] == '"42"'
        assert fields[5] == '"tile ""7"" missing"'


class TestSetupLogging:
    """Test setup_logging with real settings."""

    def test_console_only(self, settings_file: Path) -> None:
        """Test default settings install one console handler."""
        from isomap.settings import AppSettings
        from isomap.utils.logging_config import ColoredFormatter, setup_logging

        setup_logging(AppSettings(settings_file=settings_file))

        root = logging.getLogger()
        stream_handlers = [h for h in root.handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1
        assert stream_handlers[0].level == logging.INFO
        assert isinstance(stream_handlers[0].formatter, ColoredFormatter)
        assert logging.getLogger("isomap").level == logging.DEBUG
        assert logging.getLogger("PIL").level == logging.INFO

    def test_file_logging(self, settings_file: Path, tmp_path: Path) -> None:
        """Test file logging writes CSV lines to the configured path."""
        from isomap.settings import AppSettings
        from isomap.utils.logging_config import setup_logging

        settings = AppSettings(settings_file=settings_file)
        settings.logging.console_logging = False
        settings.logging.file_logging = True
        log_file = tmp_path / "logs" / "run.csv"
        settings.logging.log_file_path = str(log_file)

        setup_logging(settings)
        logging.getLogger("isomap.test").debug("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        file_handlers = [
            h for h in logging.getLogger().handlers
            if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        content = log_file.read_text(encoding="utf-8")
        assert '"written to file"' in content
        assert '"isomap.test"' in content

    def test_invalid_level_ignored(self, settings_file: Path) -> None:
        """Test an invalid console level keeps the previous one."""
        from isomap.settings import AppSettings

        settings = AppSettings(settings_file=settings_file)
        settings.logging.console_log_level = "debug"
        settings.logging.console_log_level = "LOUD"
        assert settings.console_log_level == "DEBUG"

"""
Unit tests for LoggingManager and the log formatters.
"""

import json
import logging
import logging.handlers
import sys

import pytest
from rich.logging import RichHandler

from travelbook.logging import (
    LoggingConfig,
    LoggingManager,
    StructuredFormatter,
    configure_logging,
    create_default_config,
    logging_manager,
)


@pytest.mark.unit
class TestLoggingConfig:
    """Test the plain logging configuration object."""

    def test_defaults(self):
        config = create_default_config()

        assert config.level == logging.WARNING
        assert config.format_type == "console"
        assert config.output == ["console"]
        assert config.service_name == "travelbook"

    def test_level_names_are_resolved(self):
        assert LoggingConfig(level="debug").level == logging.DEBUG

    def test_single_output_becomes_list(self):
        assert LoggingConfig(output="file").output == ["file"]


@pytest.mark.unit
class TestLoggingManager:
    """Test LoggingManager configuration."""

    def test_singleton(self):
        assert LoggingManager() is LoggingManager()
        assert LoggingManager() is logging_manager

    def test_console_handler(self):
        configure_logging(LoggingConfig(level="INFO"))

        assert len(logging_manager.handlers) == 1
        assert logging_manager.handlers[0] in logging.getLogger().handlers
        assert logging.getLogger("travelbook").level == logging.INFO

    def test_rich_handler(self):
        configure_logging(LoggingConfig(format_type="rich"))

        assert isinstance(logging_manager.handlers[0], RichHandler)

    def test_file_handler_default_path(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)

        configure_logging(LoggingConfig(output="file"))

        handler = logging_manager.handlers[0]
        assert isinstance(handler, logging.handlers.RotatingFileHandler)
        assert (temp_dir / "logs").is_dir()
        logging_manager.reset()

    def test_reconfigure_replaces_own_handlers_only(self):
        foreign = logging.NullHandler()
        logging.getLogger().addHandler(foreign)
        try:
            configure_logging(LoggingConfig())
            configure_logging(LoggingConfig(output=["console", "console"]))

            root_handlers = logging.getLogger().handlers
            assert len(logging_manager.handlers) == 2
            assert all(h in root_handlers for h in logging_manager.handlers)
            assert foreign in root_handlers
        finally:
            logging.getLogger().removeHandler(foreign)

    def test_unknown_output(self):
        with pytest.raises(ValueError):
            configure_logging(LoggingConfig(output="syslog"))

    def test_reset(self):
        configure_logging(LoggingConfig())
        handler = logging_manager.handlers[0]

        logging_manager.reset()

        assert logging_manager.handlers == []
        assert handler not in logging.getLogger().handlers


@pytest.mark.unit
class TestStructuredFormatter:
    """Test JSON log lines."""

    def make_record(self, **extra):
        record = logging.LogRecord(
            "travelbook.test", logging.INFO, __file__, 10, "Saved %d travels", (5,), None
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_fields(self):
        entry = json.loads(StructuredFormatter("travelbook", "0.1.0").format(self.make_record()))

        assert entry["message"] == "Saved 5 travels"
        assert entry["level"] == "INFO"
        assert entry["service"] == "travelbook"
        assert entry["version"] == "0.1.0"
        assert entry["logger"] == "travelbook.test"

    def test_session_fields(self):
        record = self.make_record(command="del", travel_id=101, unrelated="x")

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["command"] == "del"
        assert entry["travel_id"] == 101
        assert "unrelated" not in entry
        assert "data_file" not in entry

    def test_exception(self):
        try:
            raise ValueError("bad line")
        except ValueError:
            record = self.make_record()
            record.exc_info = sys.exc_info()

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["exception"]["type"] == "ValueError"
        assert entry["exception"]["message"] == "bad line"

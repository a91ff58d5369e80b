"""
Centralized logging configuration and management.

Provides the LoggingManager singleton that owns the handlers installed on
the root logger. Handlers only ever write to stderr or to a file, so stdout
is left to the interactive session.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List

from travelbook.constants import DEFAULT_LOG_FILE

from .config import LoggingConfig
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler

PACKAGE_LOGGER = "travelbook"


class LoggingManager:
    """Installs and removes the handlers described by a LoggingConfig."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config = None
            self.handlers: List[logging.Handler] = []
            self._initialized = True

    def configure(self, config: LoggingConfig):
        """Replace the handlers installed by a previous call with new ones."""
        self.reset()
        self.config = config

        logging.getLogger().setLevel(config.level)
        logging.getLogger(PACKAGE_LOGGER).setLevel(config.level)

        for output in config.output:
            handler = self._create_handler(output, config)
            handler.setLevel(config.level)
            logging.getLogger().addHandler(handler)
            self.handlers.append(handler)

    def reset(self):
        """Remove every handler this manager installed on the root logger."""
        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    def _create_handler(self, output: str, config: LoggingConfig) -> logging.Handler:
        if output == "file":
            handler = self._create_file_handler(config)
        elif output == "console" and config.format_type == "rich":
            # The rich handler brings its own layout
            return create_rich_handler()
        elif output == "console":
            handler = logging.StreamHandler(sys.stderr)
        else:
            raise ValueError(f"Unknown log output: {output}")

        if config.format_type == "json":
            handler.setFormatter(StructuredFormatter(config.service_name, config.version))
        else:
            handler.setFormatter(create_console_formatter())
        return handler

    def _create_file_handler(self, config: LoggingConfig) -> logging.Handler:
        file_path = Path(config.file_path or DEFAULT_LOG_FILE)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        return logging.handlers.RotatingFileHandler(
            file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)

"""
Log formatters for different output formats.

Provides JSON lines for machine consumption, a plain console layout and a
Rich handler for interactive terminals. All of them target stderr or a file.
"""

import json
import logging
import traceback
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

# Attributes passed through ``extra=`` that are copied into JSON entries
SESSION_FIELDS = ("command", "travel_id", "data_file", "line_number")


class StructuredFormatter(logging.Formatter):
    """JSON formatter writing one object per log record."""

    def __init__(self, service_name: str = "travelbook", version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        for name in SESSION_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value

        if record.exc_info:
            exc_type, exc_value, exc_traceback = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_traceback),
            }

        return json.dumps(entry, default=str)


def create_console_formatter() -> logging.Formatter:
    """Plain one-line layout used for console and file output."""
    return logging.Formatter(
        "%(asctime)s %(levelname)-8s %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_rich_handler() -> logging.Handler:
    """Rich handler bound to stderr; log text is never parsed as markup."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler

"""
Runtime logging settings.

``LoggingConfig`` is the resolved form handed to the LoggingManager: levels
are numeric and outputs are always a list. The user-facing, validated
settings live in ``travelbook.core.config``.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from travelbook.constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FILE_SIZE_BYTES


@dataclass
class LoggingConfig:
    """Configuration for the logging system."""

    level: Union[str, int] = logging.WARNING
    format_type: str = "console"  # "console", "json", "rich"
    output: Union[str, List[str]] = "console"  # "console", "file" or both
    file_path: Optional[Path] = None
    max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT
    service_name: str = "travelbook"
    version: str = "unknown"

    def __post_init__(self):
        if isinstance(self.level, str):
            self.level = getattr(logging, self.level.upper())
        if isinstance(self.output, str):
            self.output = [self.output]


def create_default_config() -> LoggingConfig:
    """Warnings and errors only, human-readable, on stderr."""
    return LoggingConfig()

"""
Logging context management.

Wraps an operation with entry, success and failure log messages.
"""

import logging
from typing import Optional


class LoggingContext:
    """Context manager for structured logging with entry/exit messages.

    Exceptions raised inside the block are logged with ``failure_msg`` and
    then propagate unchanged.
    """

    def __init__(
        self,
        entry_msg: Optional[str] = None,
        success_msg: Optional[str] = None,
        failure_msg: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        entry_level: int = logging.DEBUG,
        success_level: int = logging.INFO,
        failure_level: int = logging.ERROR,
    ):
        self.entry_msg = entry_msg
        self.success_msg = success_msg
        self.failure_msg = failure_msg
        self.logger = logger or logging.getLogger(__name__)
        self.entry_level = entry_level
        self.success_level = success_level
        self.failure_level = failure_level

    def __enter__(self):
        self.log(self.entry_msg, self.entry_level)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.log(self.success_msg, self.success_level)
        elif self.failure_msg:
            self.log(f"{self.failure_msg}: {exc_value}", self.failure_level)
        return False

    def log(self, message: Optional[str], level: int = logging.INFO):
        if message:
            self.logger.log(level, message)

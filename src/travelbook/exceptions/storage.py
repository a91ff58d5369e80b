"""
Data storage-related exceptions.

All exceptions related to reading and writing the travel data file.
"""

from pathlib import Path
from typing import Optional

from .base import ExceptionContext, TravelbookError


class DataStorageError(TravelbookError):
    """Base class for data storage-related errors."""


class FileStorageError(DataStorageError):
    """Raised when file storage operations fail."""

    def __init__(self, operation: str, file_path: Path, details: Optional[str] = None):
        self.operation = operation
        self.file_path = file_path

        message = f"File {operation} failed: {file_path}"
        if details:
            message += f" - {details}"

        help_text = (
            f"Check file permissions and available disk space for {file_path.parent}"
        )
        context = ExceptionContext(help_text=help_text, error_code="FILE_STORAGE_ERROR")
        super().__init__(message, context)


class RecordFormatError(DataStorageError):
    """Raised when a line of the data file cannot be decoded into a travel."""

    def __init__(self, line_number: int, line: str, details: Optional[str] = None):
        self.line_number = line_number
        self.line = line

        message = f"Invalid record on line {line_number}: {line!r}"
        if details:
            message += f" - {details}"

        context = ExceptionContext(
            help_text="The line is skipped and dropped from the file on the next change",
            error_code="RECORD_FORMAT_ERROR",
        )
        super().__init__(message, context)

"""
Data storage implementations.

Contains the file-backed persistence used to load and save travels.
"""

from .csv_storage import CsvStorage
from .file_storage import FileStorage, LoadResult

__all__ = [
    "CsvStorage",
    "FileStorage",
    "LoadResult",
]

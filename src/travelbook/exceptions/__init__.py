"""
Travelbook Exception Hierarchy

Exception Hierarchy:
    TravelbookError (base)
    ├── CommandError
    │   ├── UnknownCommandError
    │   ├── FieldCountError
    │   └── FieldValidationError
    │       ├── InvalidIdError
    │       ├── InvalidDateError
    │       ├── InvalidDayCountError
    │       ├── InvalidPriceError
    │       └── InvalidVehicleError
    ├── StoreError
    │   ├── DuplicateTravelError
    │   └── TravelNotFoundError
    ├── DataStorageError
    │   ├── FileStorageError
    │   └── RecordFormatError
    └── ConfigurationError
        ├── InvalidConfigurationError
        └── ConfigurationValidationError
"""

from .base import ExceptionContext, TravelbookError

# Command exceptions
from .commands import (
    CommandError,
    FieldCountError,
    FieldValidationError,
    InvalidDateError,
    InvalidDayCountError,
    InvalidIdError,
    InvalidPriceError,
    InvalidVehicleError,
    UnknownCommandError,
)

# Configuration exceptions
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

# Storage exceptions
from .storage import DataStorageError, FileStorageError, RecordFormatError

# Store exceptions
from .store import DuplicateTravelError, StoreError, TravelNotFoundError

__all__ = [
    # Base
    "TravelbookError",
    "ExceptionContext",
    # Commands
    "CommandError",
    "UnknownCommandError",
    "FieldCountError",
    "FieldValidationError",
    "InvalidIdError",
    "InvalidDateError",
    "InvalidDayCountError",
    "InvalidPriceError",
    "InvalidVehicleError",
    # Store
    "StoreError",
    "DuplicateTravelError",
    "TravelNotFoundError",
    # Storage
    "DataStorageError",
    "FileStorageError",
    "RecordFormatError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]

"""
Configuration management for Travelbook.

Usage:
    from travelbook.core.config import ConfigManager

    config = ConfigManager(Path("travelbook.toml")).load_config()
    data_file = config.storage.data_file
"""

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .manager import ConfigManager
from .models import (
    LoggingConfig,
    LogLevel,
    StorageConfig,
    TravelbookConfig,
    TravelbookSettings,
)

__all__ = [
    # Configuration models
    "TravelbookConfig",
    "StorageConfig",
    "LoggingConfig",
    "LogLevel",
    "TravelbookSettings",
    # Configuration management
    "ConfigManager",
    # Exceptions
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]

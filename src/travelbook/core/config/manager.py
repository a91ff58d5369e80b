"""
Configuration manager for Travelbook.

Loads the optional TOML configuration file, applies environment variable
overrides and validates the result into a TravelbookConfig.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from travelbook.exceptions import (
    ConfigurationValidationError,
    InvalidConfigurationError,
)

from .models import TravelbookConfig, TravelbookSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Configuration manager with file and environment sources.

    Precedence, lowest first: model defaults, TOML file, environment.
    Command-line options are applied by the caller on top of the result.
    """

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else None
        self._config: Optional[TravelbookConfig] = None

    def load_config(self) -> TravelbookConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        if self.config_file is not None:
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = TravelbookConfig(**config_data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise ConfigurationValidationError(errors)
        except TypeError as e:
            raise ConfigurationValidationError([f"Configuration validation failed: {e}"])

        logger.debug(f"Loaded configuration: {self._config.model_dump()}")
        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            )
        except OSError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Cannot read file: {e}", "a readable TOML file"
            )

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = TravelbookSettings()

        storage_config = config_data.setdefault("storage", {})
        logging_config = config_data.setdefault("logging", {})

        if settings.travelbook_data_file:
            storage_config["data_file"] = settings.travelbook_data_file
        if settings.travelbook_log_level:
            logging_config["level"] = settings.travelbook_log_level.upper()
        if settings.travelbook_log_format:
            logging_config["format"] = settings.travelbook_log_format
        if settings.travelbook_log_output:
            # Parse comma-separated outputs
            outputs = [o.strip() for o in settings.travelbook_log_output.split(",")]
            logging_config["output"] = outputs
        if settings.travelbook_log_file_path:
            logging_config["file_path"] = settings.travelbook_log_file_path

        return config_data

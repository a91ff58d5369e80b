"""
Configuration models for Travelbook.

This module defines Pydantic-based configuration models that provide
validation, type safety, and documentation for all Travelbook configuration.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from travelbook.constants import (
    DEFAULT_DATA_FILE,
    DEFAULT_FILE_ENCODING,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    MIN_LOG_FILE_SIZE_BYTES,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class StorageConfig(BaseModel):
    """Data file configuration."""

    data_file: Path = Field(
        Path(DEFAULT_DATA_FILE), description="Delimited file holding the travels"
    )
    encoding: str = Field(DEFAULT_FILE_ENCODING, description="Data file encoding")

    @field_validator("data_file")
    @classmethod
    def validate_data_file(cls, v: Path) -> Path:
        if isinstance(v, str):
            v = Path(v)
        if not str(v).strip():
            raise ValueError("data_file must not be empty")
        return v.expanduser()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class TravelbookConfig(BaseModel):
    """Main Travelbook configuration model."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class TravelbookSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    travelbook_data_file: Optional[str] = Field(None, alias="TRAVELBOOK_DATA_FILE")
    travelbook_log_level: Optional[str] = Field(None, alias="TRAVELBOOK_LOG_LEVEL")
    travelbook_log_format: Optional[str] = Field(None, alias="TRAVELBOOK_LOG_FORMAT")
    travelbook_log_output: Optional[str] = Field(None, alias="TRAVELBOOK_LOG_OUTPUT")
    travelbook_log_file_path: Optional[str] = Field(
        None, alias="TRAVELBOOK_LOG_FILE_PATH"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

"""
Travelbook Logging Package

Configurable logging with console, JSON and Rich outputs:
- config: Logging configuration
- formatters: Log formatting (JSON, console, rich)
- manager: Centralized logging setup
- context: Entry/success/failure logging around an operation
"""

from .config import LoggingConfig, create_default_config
from .context import LoggingContext
from .formatters import StructuredFormatter
from .manager import LoggingManager, configure_logging, logging_manager

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "LoggingContext",
    "StructuredFormatter",
    "configure_logging",
    "create_default_config",
    "logging_manager",
]

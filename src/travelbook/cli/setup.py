"""
CLI setup and initialization functions.

Handles logging configuration before the session starts.
"""

import logging

from travelbook import __version__
from travelbook.core.config import LoggingConfig as LoggingSettings
from travelbook.logging import LoggingConfig, configure_logging


def resolve_log_level(configured: str, verbose: int = 0) -> int:
    """Pick the effective level; each -v lowers it one step from the configured one."""
    if verbose > 1:
        return logging.DEBUG
    if verbose:
        return min(logging.INFO, getattr(logging, configured))
    return getattr(logging, configured)


def setup_logging(settings: LoggingSettings, verbose: int = 0) -> None:
    """Set up logging from the loaded configuration and the -v count."""
    level = resolve_log_level(settings.level.value, verbose)
    configure_logging(
        LoggingConfig(
            level=level,
            format_type=settings.format,
            output=list(settings.output),
            file_path=settings.file_path,
            max_file_size=settings.max_file_size,
            backup_count=settings.backup_count,
            service_name="travelbook",
            version=__version__,
        )
    )
    logging.getLogger("travelbook.cli").debug(
        f"Logging configured (level={logging.getLevelName(level)}, verbose={verbose})"
    )

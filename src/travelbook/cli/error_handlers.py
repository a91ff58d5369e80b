"""
Centralized error handling for the CLI.

Errors that end the process are printed to stderr so that stdout only ever
carries the command session.
"""

import functools
import logging
import sys

from rich.console import Console
from rich.markup import escape

from travelbook.exceptions import ConfigurationError, DataStorageError, TravelbookError

logger = logging.getLogger(__name__)

console = Console(stderr=True, highlight=False)

EXIT_INTERRUPTED = 1
EXIT_CONFIGURATION_ERROR = 3
EXIT_STORAGE_ERROR = 6
EXIT_TRAVELBOOK_ERROR = 10


def handle_cli_errors(func):
    """Decorator to handle CLI errors with proper formatting and exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            _handle_keyboard_interrupt()
        except ConfigurationError as e:
            _handle_configuration_error(e)
        except DataStorageError as e:
            _handle_storage_error(e)
        except TravelbookError as e:
            _handle_travelbook_error(e)

    return wrapper


def _print_error(message: str, style: str = "red"):
    console.print(f"[{style}]{escape(message)}[/{style}]", soft_wrap=True)


def _print_help(message: str):
    console.print(f"[blue]Help: {escape(message)}[/blue]", soft_wrap=True)


def _handle_keyboard_interrupt():
    _print_error("\nOperation cancelled by user", "yellow")
    sys.exit(EXIT_INTERRUPTED)


def _handle_configuration_error(e: ConfigurationError):
    _print_error(f"Configuration Error: {e.message}")
    if e.help_text:
        _print_help(e.help_text)

    logger.error(f"Configuration error ({e.error_code}): {e.message}")
    sys.exit(EXIT_CONFIGURATION_ERROR)


def _handle_storage_error(e: DataStorageError):
    _print_error(f"Storage Error: {e.message}")
    if e.help_text:
        _print_help(e.help_text)

    logger.error(f"Storage error ({e.error_code}): {e.message}")
    sys.exit(EXIT_STORAGE_ERROR)


def _handle_travelbook_error(e: TravelbookError):
    _print_error(f"Error: {e.message}")
    if e.help_text:
        _print_help(e.help_text)

    logger.error(f"Travelbook error: {e.to_dict()}")
    sys.exit(EXIT_TRAVELBOOK_ERROR)

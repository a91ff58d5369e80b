"""
Command-related exceptions.

Raised while decoding an interactive command line. The message of every
exception in this module is the single terse line shown to the user.
"""

from typing import Optional

from .base import ExceptionContext, TravelbookError


class CommandError(TravelbookError):
    """Base class for errors reported back to the interactive user."""

    token = "wrong command"

    def __init__(self, context: Optional[ExceptionContext] = None):
        super().__init__(self.token, context)


class UnknownCommandError(CommandError):
    """Raised when the command token is not one of the supported commands."""

    token = "wrong command"

    def __init__(self, command: str):
        self.command = command
        context = ExceptionContext(
            help_text="Supported commands: print, add, del, edit, sort, find, avg, exit",
            error_code="UNKNOWN_COMMAND",
            context={"command": command},
        )
        super().__init__(context)


class FieldCountError(CommandError):
    """Raised when a command receives the wrong number of arguments."""

    token = "wrong field count"

    def __init__(self, command: str, received: int):
        self.command = command
        self.received = received
        context = ExceptionContext(
            error_code="WRONG_FIELD_COUNT",
            context={"command": command, "received": received},
        )
        super().__init__(context)


class FieldValidationError(CommandError):
    """Base class for a single field that failed validation."""

    field_name = "field"

    def __init__(self, value: str):
        self.value = value
        context = ExceptionContext(
            error_code=f"INVALID_{self.field_name.upper()}",
            context={"field": self.field_name, "value": value},
        )
        super().__init__(context)


class InvalidIdError(FieldValidationError):
    """Raised for a malformed, duplicate or unknown travel id."""

    token = "wrong id"
    field_name = "id"


class InvalidDateError(FieldValidationError):
    """Raised when a date does not match dd/MM/yyyy."""

    token = "wrong date"
    field_name = "date"


class InvalidDayCountError(FieldValidationError):
    """Raised when the day count is not a positive integer."""

    token = "wrong day count"
    field_name = "days"


class InvalidPriceError(FieldValidationError):
    """Raised when the price is not a non-negative decimal."""

    token = "wrong price"
    field_name = "price"


class InvalidVehicleError(FieldValidationError):
    """Raised when the vehicle is not one of the supported kinds."""

    token = "wrong vehicle"
    field_name = "vehicle"

"""
Field validation utilities for travel records.

Every parser in this module takes the raw text typed by the user (or read
from the data file) and either returns the decoded value or raises the
matching FieldValidationError. None of them touch the record store.
"""

import re
from datetime import date, datetime
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

from travelbook.constants import (
    DATE_FORMAT,
    ID_DIGITS,
    MAX_PRICE_INTEGER_DIGITS,
    MIN_DAY_COUNT,
    PRICE_QUANTUM,
)
from travelbook.exceptions import (
    InvalidDateError,
    InvalidDayCountError,
    InvalidIdError,
    InvalidPriceError,
    InvalidVehicleError,
)
from travelbook.models import Vehicle

ID_PATTERN = re.compile(rf"^\d{{{ID_DIGITS}}}$", re.ASCII)
DATE_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$", re.ASCII)
INTEGER_PATTERN = re.compile(r"^\d+$", re.ASCII)
DECIMAL_PATTERN = re.compile(rf"^-?\d{{1,{MAX_PRICE_INTEGER_DIGITS}}}(\.\d+)?$", re.ASCII)
CITY_SEPARATOR_PATTERN = re.compile(r"[\s-]+")


def parse_id(text: str) -> int:
    """Parse a travel id made of exactly three decimal digits."""
    candidate = text.strip()
    if not ID_PATTERN.match(candidate) or int(candidate) == 0:
        raise InvalidIdError(text)
    return int(candidate)


def parse_date(text: str) -> date:
    """Parse a dd/MM/yyyy date; impossible calendar dates are rejected."""
    candidate = text.strip()
    if not DATE_PATTERN.match(candidate):
        raise InvalidDateError(text)
    try:
        return datetime.strptime(candidate, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateError(text)


def parse_days(text: str) -> int:
    candidate = text.strip()
    if not INTEGER_PATTERN.match(candidate):
        raise InvalidDayCountError(text)
    days = int(candidate)
    if days < MIN_DAY_COUNT:
        raise InvalidDayCountError(text)
    return days


def parse_price(text: str) -> Decimal:
    """Parse a non-negative price, accepting a decimal comma.

    At most MAX_PRICE_INTEGER_DIGITS digits are allowed before the decimal
    point so that every accepted price can be rounded to cents.
    """
    candidate = text.strip().replace(",", ".")
    if not DECIMAL_PATTERN.match(candidate):
        raise InvalidPriceError(text)
    try:
        price = Decimal(candidate)
    except InvalidOperation:
        raise InvalidPriceError(text)
    if price < 0:
        raise InvalidPriceError(text)
    # "-0" and "-0.00" are accepted as zero
    return abs(price) if price == 0 else price


def parse_vehicle(text: str) -> Vehicle:
    try:
        return Vehicle[text.strip().upper()]
    except KeyError:
        raise InvalidVehicleError(text)


def format_city(text: str) -> str:
    """Normalize a city name: "new-YORK  city" becomes "New York City"."""
    words = [word for word in CITY_SEPARATOR_PATTERN.split(text) if word]
    return " ".join(word[0].upper() + word[1:].lower() for word in words)


def format_id(value: int) -> str:
    return f"{value:0{ID_DIGITS}d}"


def format_date(value: date) -> str:
    # strftime does not pad years below 1000
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def format_price(value: Decimal) -> str:
    """Format a price as #0.00 with '.' as decimal separator."""
    return str(value.quantize(Decimal(PRICE_QUANTUM), rounding=ROUND_HALF_EVEN))

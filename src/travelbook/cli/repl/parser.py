"""Decoding of interactive command lines into typed commands."""

import logging
import re
from typing import List, Optional, Tuple

from travelbook.constants import (
    EDIT_MAX_ARGUMENTS,
    EDIT_MIN_ARGUMENTS,
    FIELD_DELIMITER,
    FIELDS_PER_RECORD,
)
from travelbook.core.validation import (
    format_city,
    parse_date,
    parse_days,
    parse_id,
    parse_price,
    parse_vehicle,
)
from travelbook.exceptions import FieldCountError, InvalidIdError, UnknownCommandError
from travelbook.models import Travel, TravelChanges
from travelbook.services import TravelStore

from .commands import (
    AddCommand,
    AverageCommand,
    Command,
    CommandName,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    PrintCommand,
    SortCommand,
)

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s+")


def tokenize(line: str) -> Tuple[str, List[str]]:
    """Split a raw line into a lower-cased command token and its arguments.

    "ADD 106;Riga;..." gives ("add", ["106", "riga", ...]). Empty fields are
    kept so that positional arguments stay aligned.
    """
    parts = WHITESPACE.split(line.strip().lower(), maxsplit=1)
    name = parts[0]
    args = parts[1].split(FIELD_DELIMITER) if len(parts) > 1 else []
    return name, args


class CommandParser:
    """Turns command lines into Command values.

    Field-count checks run first, then fields are validated left to right
    and the first failure is raised. Id checks consult ``store`` so that
    ``add`` rejects taken ids and ``del``/``edit`` reject unknown ones.
    """

    def __init__(self, store: TravelStore):
        self.store = store

    def parse(self, line: str) -> Command:
        name, args = tokenize(line)
        try:
            command_name = CommandName(name)
        except ValueError:
            raise UnknownCommandError(name)

        logger.debug(f"Decoding '{command_name.value}' with {len(args)} argument(s)")

        if command_name is CommandName.ADD:
            return self._parse_add(args)
        if command_name is CommandName.DEL:
            return self._parse_delete(args)
        if command_name is CommandName.EDIT:
            return self._parse_edit(args)
        if command_name is CommandName.FIND:
            return self._parse_find(args)

        # Commands without arguments ignore anything typed after them
        return {
            CommandName.PRINT: PrintCommand,
            CommandName.SORT: SortCommand,
            CommandName.AVG: AverageCommand,
            CommandName.EXIT: ExitCommand,
        }[command_name]()

    def _parse_add(self, args: List[str]) -> AddCommand:
        if len(args) != FIELDS_PER_RECORD or any(not arg.strip() for arg in args):
            raise FieldCountError(CommandName.ADD.value, len(args))

        travel_id = parse_id(args[0])
        if self.store.contains(travel_id):
            raise InvalidIdError(args[0])

        city = format_city(args[1])
        if not city:
            raise FieldCountError(CommandName.ADD.value, len(args))

        travel = Travel(
            id=travel_id,
            city=city,
            date=parse_date(args[2]),
            days=parse_days(args[3]),
            price=parse_price(args[4]),
            vehicle=parse_vehicle(args[5]),
        )
        return AddCommand(travel)

    def _parse_delete(self, args: List[str]) -> DeleteCommand:
        if len(args) != 1:
            raise FieldCountError(CommandName.DEL.value, len(args))
        return DeleteCommand(self._existing_id(args[0]))

    def _parse_edit(self, args: List[str]) -> EditCommand:
        if not EDIT_MIN_ARGUMENTS <= len(args) <= EDIT_MAX_ARGUMENTS:
            raise FieldCountError(CommandName.EDIT.value, len(args))

        travel_id = self._existing_id(args[0])

        # Missing trailing positions are treated like empty ones
        city, travel_date, days, price, vehicle = (
            _optional(args, position) for position in range(1, FIELDS_PER_RECORD)
        )
        changes = TravelChanges(
            city=(format_city(city) or None) if city else None,
            date=parse_date(travel_date) if travel_date else None,
            days=parse_days(days) if days else None,
            price=parse_price(price) if price else None,
            vehicle=parse_vehicle(vehicle) if vehicle else None,
        )
        return EditCommand(travel_id, changes)

    def _parse_find(self, args: List[str]) -> FindCommand:
        if len(args) != 1:
            raise FieldCountError(CommandName.FIND.value, len(args))
        return FindCommand(parse_price(args[0]))

    def _existing_id(self, raw: str) -> int:
        travel_id = parse_id(raw)
        if not self.store.contains(travel_id):
            raise InvalidIdError(raw)
        return travel_id


def _optional(args: List[str], position: int) -> Optional[str]:
    if position >= len(args) or not args[position].strip():
        return None
    return args[position]

"""
Typed interactive commands.

Each supported command token decodes into one of these values. Arguments
are validated once, while decoding, so handlers receive ready-to-use data.
"""

import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from travelbook.models import Travel, TravelChanges


class CommandName(str, enum.Enum):
    PRINT = "print"
    ADD = "add"
    DEL = "del"
    EDIT = "edit"
    SORT = "sort"
    FIND = "find"
    AVG = "avg"
    EXIT = "exit"


@dataclass(frozen=True)
class PrintCommand:
    pass


@dataclass(frozen=True)
class AddCommand:
    travel: Travel


@dataclass(frozen=True)
class DeleteCommand:
    travel_id: int


@dataclass(frozen=True)
class EditCommand:
    travel_id: int
    changes: TravelChanges


@dataclass(frozen=True)
class SortCommand:
    pass


@dataclass(frozen=True)
class FindCommand:
    max_price: Decimal


@dataclass(frozen=True)
class AverageCommand:
    pass


@dataclass(frozen=True)
class ExitCommand:
    pass


Command = Union[
    PrintCommand,
    AddCommand,
    DeleteCommand,
    EditCommand,
    SortCommand,
    FindCommand,
    AverageCommand,
    ExitCommand,
]

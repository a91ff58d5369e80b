"""
Interactive command interpreter.

Reads one line at a time, decodes it into a command, applies it to the
travel store and writes the store back to disk after every change.
"""

import logging
from functools import singledispatchmethod
from typing import Iterable, Optional

from travelbook.constants import (
    MSG_ADDED,
    MSG_AVERAGE,
    MSG_CHANGED,
    MSG_CREATE_FAILED,
    MSG_DELETED,
    MSG_NO_TRAVELS,
    MSG_READ_FAILED,
    MSG_SORTED,
    MSG_UPDATE_FAILED,
)
from travelbook.core.validation import format_price
from travelbook.exceptions import CommandError, FileStorageError
from travelbook.infrastructure.storage import FileStorage
from travelbook.services import TravelStore

from .commands import (
    AddCommand,
    AverageCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    PrintCommand,
    SortCommand,
)
from .parser import CommandParser, tokenize
from .presenter import Presenter

logger = logging.getLogger(__name__)


class Interpreter:
    """Runs the read-parse-dispatch-print loop over a travel store."""

    def __init__(
        self,
        store: TravelStore,
        storage: FileStorage,
        presenter: Optional[Presenter] = None,
    ):
        self.store = store
        self.storage = storage
        self.presenter = presenter or Presenter()
        self.parser = CommandParser(store)

    @classmethod
    def from_storage(cls, storage: FileStorage, presenter: Optional[Presenter] = None) -> "Interpreter":
        """Build an interpreter over the travels currently in ``storage``.

        Creates the data file with the default travels when it is missing
        and reports every line of the file that had to be skipped.
        """
        presenter = presenter or Presenter()
        result = storage.load_or_seed()

        if result.read_error is not None:
            presenter.line(MSG_READ_FAILED)
        if result.write_error is not None:
            presenter.line(MSG_CREATE_FAILED)
        for error in result.rejected:
            presenter.invalid_record(error)

        logger.info(
            f"Session started with {len(result.travels)} travels "
            f"({len(result.rejected)} line(s) skipped)"
        )
        return cls(TravelStore(result.travels), storage, presenter)

    def run(self, lines: Iterable[str]) -> int:
        """Execute ``lines`` until ``exit`` or end of input. Returns the exit code."""
        for line in lines:
            if not self.execute(line):
                break
        return 0

    def execute(self, line: str) -> bool:
        """Execute one command line. Returns False once the session should end."""
        try:
            command = self.parser.parse(line)
        except CommandError as e:
            logger.debug(
                f"Rejected command {line.strip()!r}: {e.error_code}",
                extra={"command": tokenize(line)[0]},
            )
            self.presenter.command_error(e)
            return True

        return self.dispatch(command)

    @singledispatchmethod
    def dispatch(self, command) -> bool:
        raise TypeError(f"Unsupported command: {command!r}")

    @dispatch.register
    def _(self, command: PrintCommand) -> bool:
        self.presenter.travels(self.store)
        return True

    @dispatch.register
    def _(self, command: AddCommand) -> bool:
        self.store.insert_sorted(command.travel)
        logger.info(f"Added travel {command.travel.id}", extra={"travel_id": command.travel.id})
        self._persist()
        self.presenter.line(MSG_ADDED)
        return True

    @dispatch.register
    def _(self, command: DeleteCommand) -> bool:
        self.store.remove_by_id(command.travel_id)
        logger.info(f"Deleted travel {command.travel_id}", extra={"travel_id": command.travel_id})
        self._persist()
        self.presenter.line(MSG_DELETED)
        return True

    @dispatch.register
    def _(self, command: EditCommand) -> bool:
        current = self.store.find_by_id(command.travel_id)
        self.store.replace(command.travel_id, command.changes.apply_to(current))
        logger.info(f"Edited travel {command.travel_id}", extra={"travel_id": command.travel_id})
        self._persist()
        self.presenter.line(MSG_CHANGED)
        return True

    @dispatch.register
    def _(self, command: SortCommand) -> bool:
        self.store.sort_by_date()
        self._persist()
        self.presenter.line(MSG_SORTED)
        return True

    @dispatch.register
    def _(self, command: FindCommand) -> bool:
        self.presenter.travels(self.store.filter_by_max_price(command.max_price))
        return True

    @dispatch.register
    def _(self, command: AverageCommand) -> bool:
        average = self.store.average_price()
        if average is None:
            self.presenter.line(MSG_NO_TRAVELS)
        else:
            self.presenter.line(MSG_AVERAGE.format(format_price(average)))
        return True

    @dispatch.register
    def _(self, command: ExitCommand) -> bool:
        logger.info("Exit requested")
        return False

    def _persist(self) -> None:
        # The in-memory store stays authoritative when the write fails
        try:
            self.storage.save(self.store.records)
        except FileStorageError as e:
            logger.error(e.message)
            self.presenter.line(MSG_UPDATE_FAILED)

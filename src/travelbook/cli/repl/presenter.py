"""Console output for the interactive session."""

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from travelbook.constants import MSG_INVALID_LINE
from travelbook.core.validation import format_date, format_id, format_price
from travelbook.exceptions import CommandError, RecordFormatError
from travelbook.models import Travel


class Presenter:
    """Renders travel tables and the one-line command results on stdout."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def line(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def command_error(self, error: CommandError) -> None:
        self.line(error.token)

    def invalid_record(self, error: RecordFormatError) -> None:
        self.line(MSG_INVALID_LINE.format(error.line))

    def travels(self, travels: Iterable[Travel]) -> None:
        table = Table()
        table.add_column("ID", style="cyan", no_wrap=True)
        # Only the city gives way on a narrow console
        table.add_column("City", overflow="fold")
        table.add_column("Date", no_wrap=True)
        table.add_column("Days", justify="right", no_wrap=True)
        table.add_column("Price", justify="right", style="green", no_wrap=True)
        table.add_column("Vehicle", no_wrap=True)

        for travel in travels:
            table.add_row(
                format_id(travel.id),
                Text(travel.city),
                format_date(travel.date),
                str(travel.days),
                format_price(travel.price),
                travel.vehicle.value,
            )

        self.console.print(table)

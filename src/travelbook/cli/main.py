#!/usr/bin/env python3
"""Travelbook CLI main entry point.

Starts an interactive session over the travel data file. Commands are read
from stdin one per line and answered on stdout; diagnostics go to stderr.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from travelbook import __version__
from travelbook.core.config import ConfigManager
from travelbook.infrastructure.storage import CsvStorage

from .error_handlers import handle_cli_errors
from .repl import Interpreter, Presenter
from .setup import setup_logging

logger = logging.getLogger(__name__)


@click.command(name="travelbook")
@click.version_option(version=__version__, prog_name="travelbook")
@click.option(
    "--file", "-f", "data_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Data file holding the travels (created with sample travels when missing)"
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path"
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
@handle_cli_errors
def cli(data_file: Optional[Path], config: Optional[Path], verbose: int) -> None:
    """Travelbook: interactive travel record manager.

    Reads commands from standard input, one per line, and keeps the data
    file in sync after every change.

    \b
    Commands:
        print                                   list all travels
        add id;city;dd/mm/yyyy;days;price;vehicle
        del id                                  delete a travel
        edit id;city;date;days;price;vehicle    empty fields keep their value
        sort                                    order travels by date
        find price                              travels costing at most price
        avg                                     average price
        exit                                    end the session

    \b
    Examples:
        travelbook
        travelbook --file trips.csv -v
        printf 'avg\\nexit\\n' | travelbook -f db.csv
    """
    app_config = ConfigManager(config).load_config()
    setup_logging(app_config.logging, verbose)

    storage = CsvStorage(
        data_file or app_config.storage.data_file,
        encoding=app_config.storage.encoding,
    )
    logger.info(f"Travelbook {__version__} using data file '{storage.file_path}'")

    interpreter = Interpreter.from_storage(storage, Presenter())
    sys.exit(interpreter.run(click.get_text_stream("stdin")))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

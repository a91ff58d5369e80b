"""
Unit tests for console output.
"""

import dataclasses
import io

import pytest
from rich.console import Console

from travelbook.cli.repl import Presenter
from travelbook.exceptions import FieldCountError, RecordFormatError


@pytest.mark.unit
class TestPresenter:
    """Test what the presenter writes to its console."""

    def test_line(self, presenter, output):
        presenter.line("average=440.20")

        assert output.getvalue() == "average=440.20\n"

    def test_line_is_not_markup(self, presenter, output):
        presenter.line("[bold]Invalid data format: x[/bold]")

        assert output.getvalue() == "[bold]Invalid data format: x[/bold]\n"

    def test_command_error_prints_token_only(self, presenter, output):
        presenter.command_error(FieldCountError("add", 3))

        assert output.getvalue() == "wrong field count\n"

    def test_invalid_record(self, presenter, output):
        presenter.invalid_record(RecordFormatError(2, "102;Rome;15/05/2021;7;300.00"))

        assert output.getvalue() == "Invalid data format: 102;Rome;15/05/2021;7;300.00\n"

    def test_travels_table(self, presenter, output, default_travels):
        presenter.travels(default_travels)

        text = output.getvalue()
        for header in ("ID", "City", "Date", "Days", "Price", "Vehicle"):
            assert header in text
        assert "Daugavpils" in text
        assert "03/07/2021" in text
        assert "1000.00" in text
        assert "PLANE" in text

    def test_travels_table_zero_pads_ids(self, presenter, output, default_travels):
        presenter.travels([dataclasses.replace(default_travels[0], id=7)])

        assert "007" in output.getvalue()

    def test_empty_table_has_header_only(self, presenter, output):
        presenter.travels([])

        text = output.getvalue()
        assert "City" in text
        assert "Daugavpils" not in text

    def test_long_city_keeps_other_columns(self, default_travels):
        output = io.StringIO()
        presenter = Presenter(Console(file=output, width=80, color_system=None, highlight=False))
        city = "Abcdefghij" * 9
        travel = dataclasses.replace(default_travels[0], id=106, city=city)

        presenter.travels([travel])

        text = output.getvalue()
        assert "106" in text
        assert "03/07/2021" in text
        assert "150.50" in text
        assert "TRAIN" in text
        assert "…" not in text
        assert all(len(line) <= 80 for line in text.splitlines())

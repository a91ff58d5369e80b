"""
Unit tests for the command interpreter.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest

from travelbook.cli.repl import Interpreter
from travelbook.exceptions import FileStorageError
from travelbook.infrastructure.storage import CsvStorage
from travelbook.services import TravelStore


def lines_of(output):
    return output.getvalue().splitlines()


def ids_of(store):
    return [travel.id for travel in store]


@pytest.mark.unit
class TestInterpreterStartup:
    """Test building an interpreter from the data file."""

    def test_seeds_missing_file(self, data_file, presenter, output):
        interpreter = Interpreter.from_storage(CsvStorage(data_file), presenter)

        assert len(interpreter.store) == 5
        assert data_file.exists()
        assert output.getvalue() == ""

    def test_reports_rejected_lines(self, data_file, presenter, output):
        data_file.write_text(
            "101;Daugavpils;03/07/2021;5;150.50;TRAIN\n"
            "102;Rome;15/05/2021;7;300.00\n",
            encoding="utf-8",
        )

        interpreter = Interpreter.from_storage(CsvStorage(data_file), presenter)

        assert ids_of(interpreter.store) == [101]
        assert lines_of(output) == ["Invalid data format: 102;Rome;15/05/2021;7;300.00"]

    def test_rejected_lines_stay_until_next_change(self, data_file, presenter):
        data_file.write_text(
            "101;Daugavpils;03/07/2021;5;150.50;TRAIN\nbroken\n",
            encoding="utf-8",
        )
        interpreter = Interpreter.from_storage(CsvStorage(data_file), presenter)

        assert "broken" in data_file.read_text(encoding="utf-8")

        interpreter.execute("sort")

        assert data_file.read_text(encoding="utf-8") == "101;Daugavpils;03/07/2021;5;150.50;TRAIN\n"

    def test_reports_unreadable_file(self, data_file, presenter, output):
        data_file.write_bytes(b"\xff\xfe\xfa")

        interpreter = Interpreter.from_storage(CsvStorage(data_file), presenter)

        assert len(interpreter.store) == 5
        assert lines_of(output) == ["Error reading file."]

    def test_reports_seed_write_failure(self, data_file, presenter, output):
        with patch.object(
            CsvStorage, "save", side_effect=FileStorageError("write", data_file, "disk full")
        ):
            interpreter = Interpreter.from_storage(CsvStorage(data_file), presenter)

        assert len(interpreter.store) == 5
        assert lines_of(output) == ["Error creating file."]


@pytest.mark.unit
class TestInterpreterCommands:
    """Test each command against the default travels."""

    def test_avg(self, interpreter, output):
        assert interpreter.execute("avg") is True
        assert lines_of(output) == ["average=440.20"]

    def test_avg_empty(self, data_file, presenter, output):
        data_file.write_text("", encoding="utf-8")
        interpreter = Interpreter.from_storage(CsvStorage(data_file), presenter)

        interpreter.execute("avg")

        assert lines_of(output) == ["No travels found."]

    def test_add(self, interpreter, output, default_data_file):
        interpreter.execute("add 106;riga;01/01/2022;2;10;bus")

        assert lines_of(output) == ["added"]
        assert ids_of(interpreter.store) == [101, 102, 103, 104, 105, 106]
        assert default_data_file.read_text(encoding="utf-8").endswith(
            "106;Riga;01/01/2022;2;10.00;BUS\n"
        )

    def test_add_inserts_before_greater_id(self, interpreter):
        interpreter.execute("del 102")
        interpreter.execute("add 102;rome;15/05/2021;7;300;bus")

        assert ids_of(interpreter.store) == [101, 102, 103, 104, 105]

    def test_delete(self, interpreter, output, default_data_file):
        interpreter.execute("del 103")

        assert lines_of(output) == ["deleted"]
        assert "Hamburg" not in default_data_file.read_text(encoding="utf-8")

    def test_edit(self, interpreter, output):
        interpreter.execute("edit 102;milan;;;;plane")

        travel = interpreter.store.find_by_id(102)
        assert lines_of(output) == ["changed"]
        assert travel.city == "Milan"
        assert travel.days == 7
        assert travel.vehicle.value == "PLANE"

    def test_edit_with_empty_fields(self, interpreter, output, default_data_file, default_file_content):
        before = interpreter.store.records

        interpreter.execute("edit 101;;;;;")

        assert lines_of(output) == ["changed"]
        assert interpreter.store.records == before
        assert default_data_file.read_text(encoding="utf-8") == default_file_content

    def test_sort(self, interpreter, output, default_data_file):
        interpreter.execute("sort")

        assert lines_of(output) == ["sorted"]
        assert ids_of(interpreter.store) == [102, 104, 101, 105, 103]
        assert default_data_file.read_text(encoding="utf-8").startswith("102;Rome")

    def test_find(self, interpreter, output):
        interpreter.execute("find 300.00")

        text = output.getvalue()
        assert "Daugavpils" in text
        assert "Rome" in text
        assert "Hamburg" not in text
        assert "Helsinki" not in text

    def test_print(self, interpreter, output):
        interpreter.execute("print")

        for city in ("Daugavpils", "Rome", "Hamburg", "Helsinki", "New York"):
            assert city in output.getvalue()

    def test_exit(self, interpreter, output):
        assert interpreter.execute("exit") is False
        assert output.getvalue() == ""

    def test_error_does_not_mutate(self, interpreter, output, default_data_file, default_file_content):
        assert interpreter.execute("add 12;riga;01/01/2022;2;10;bus") is True

        assert lines_of(output) == ["wrong id"]
        assert len(interpreter.store) == 5
        assert default_data_file.read_text(encoding="utf-8") == default_file_content

    @pytest.mark.parametrize(
        "line",
        [
            "add 106;riga;01/01/2021;3;" + "9" * 27 + ";bus",
            "edit 101;;;;" + "9" * 27 + ";",
            "find " + "9" * 27,
        ],
    )
    def test_oversized_price_is_wrong_price(
        self, interpreter, output, default_data_file, default_file_content, line
    ):
        assert interpreter.execute(line) is True

        assert lines_of(output) == ["wrong price"]
        assert ids_of(interpreter.store) == [101, 102, 103, 104, 105]
        assert interpreter.store.find_by_id(101).price == Decimal("150.50")
        assert default_data_file.read_text(encoding="utf-8") == default_file_content

    def test_early_year_survives_reload(self, interpreter, default_data_file, presenter, output):
        interpreter.execute("add 106;riga;01/01/0999;3;10;bus")

        reloaded = Interpreter.from_storage(CsvStorage(default_data_file), presenter)

        assert "106;Riga;01/01/0999;3;10.00;BUS" in default_data_file.read_text(encoding="utf-8")
        assert reloaded.store.find_by_id(106).date == date(999, 1, 1)
        assert lines_of(output) == ["added"]

    def test_unknown_command(self, interpreter, output):
        interpreter.execute("fly 101")

        assert lines_of(output) == ["wrong command"]

    def test_update_failure_keeps_memory_change(self, interpreter, output):
        with patch.object(
            interpreter.storage,
            "save",
            side_effect=FileStorageError("write", interpreter.storage.file_path, "disk full"),
        ):
            interpreter.execute("del 101")

        assert lines_of(output) == ["Error updating file.", "deleted"]
        assert not interpreter.store.contains(101)

    def test_dispatch_rejects_unknown_values(self, interpreter):
        with pytest.raises(TypeError):
            interpreter.dispatch("print")


@pytest.mark.unit
class TestInterpreterRun:
    """Test the read loop."""

    def test_stops_at_exit(self, interpreter, output):
        code = interpreter.run(["avg\n", "exit\n", "avg\n"])

        assert code == 0
        assert lines_of(output) == ["average=440.20"]

    def test_end_of_input_ends_session(self, interpreter, output):
        assert interpreter.run(["avg\n", "del 101\n"]) == 0
        assert lines_of(output) == ["average=440.20", "deleted"]

    def test_empty_line_is_wrong_command(self, interpreter, output):
        interpreter.run(["\n", "exit\n"])

        assert lines_of(output) == ["wrong command"]

    def test_constructor_uses_given_store(self, storage, presenter):
        interpreter = Interpreter(TravelStore(), storage, presenter)

        assert len(interpreter.store) == 0
        assert interpreter.parser.store is interpreter.store

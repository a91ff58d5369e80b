"""
Pytest configuration and shared fixtures for Travelbook tests.
"""

import io
import logging
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from travelbook.cli.repl import Interpreter, Presenter
from travelbook.constants import DEFAULT_TRAVEL_LINES
from travelbook.infrastructure.storage import CsvStorage
from travelbook.logging import logging_manager
from travelbook.services import TravelStore


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any logging configuration a test applied."""
    root_logger = logging.getLogger()
    package_logger = logging.getLogger("travelbook")
    root_level = root_logger.level
    package_level = package_logger.level

    yield

    logging_manager.reset()
    root_logger.setLevel(root_level)
    package_logger.setLevel(package_level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def default_file_content():
    """Exact bytes of a freshly seeded data file, as text."""
    return "".join(f"{line}\n" for line in DEFAULT_TRAVEL_LINES)


@pytest.fixture
def data_file(temp_dir):
    """Path of a data file that does not exist yet."""
    return temp_dir / "db.csv"


@pytest.fixture
def default_data_file(data_file, default_file_content):
    """Data file holding the five default travels."""
    data_file.write_text(default_file_content, encoding="utf-8")
    return data_file


@pytest.fixture
def storage(data_file):
    return CsvStorage(data_file)


@pytest.fixture
def default_travels(storage):
    """The default travels, decoded."""
    return storage.default_travels()


@pytest.fixture
def store(default_travels):
    return TravelStore(default_travels)


@pytest.fixture
def output():
    """Buffer receiving everything the presenter prints."""
    return io.StringIO()


@pytest.fixture
def presenter(output):
    console = Console(file=output, width=120, color_system=None, highlight=False)
    return Presenter(console)


@pytest.fixture
def interpreter(default_data_file, presenter):
    """Interpreter over a data file seeded with the default travels."""
    return Interpreter.from_storage(CsvStorage(default_data_file), presenter)

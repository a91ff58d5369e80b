import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from travelbook.constants import DEFAULT_FILE_ENCODING, DEFAULT_TRAVEL_LINES
from travelbook.exceptions import FileStorageError, RecordFormatError
from travelbook.logging import LoggingContext
from travelbook.models import Travel

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Travels decoded from the data file plus the lines that were skipped."""

    travels: List[Travel] = field(default_factory=list)
    rejected: List[RecordFormatError] = field(default_factory=list)
    seeded: bool = False
    read_error: Optional[FileStorageError] = None
    write_error: Optional[FileStorageError] = None


class FileStorage(ABC):
    """Whole-file persistence for the travel collection.

    The file is the single on-disk mirror of the store: it is read once at
    startup and rewritten in full after every change.
    """

    def __init__(self, file_path: Union[str, Path], encoding: str = DEFAULT_FILE_ENCODING):
        self.file_path = Path(file_path)
        self.encoding = encoding

    def load(self) -> LoadResult:
        """Read every record, skipping lines that cannot be decoded.

        Raises FileNotFoundError when the file does not exist and
        FileStorageError when it cannot be read.
        """
        if not self.file_path.exists():
            raise FileNotFoundError(self.file_path)

        with LoggingContext(
            entry_msg=f"Loading travels from '{self.file_path}'",
            success_msg=f"Loaded travels from '{self.file_path}'",
            failure_msg=f"Failed to load travels from '{self.file_path}'",
            logger=logger,
            success_level=logging.DEBUG,
        ):
            try:
                with open(self.file_path, "r", encoding=self.encoding) as data_file:
                    lines = data_file.read().splitlines()
            except (OSError, UnicodeDecodeError) as e:
                raise FileStorageError("read", self.file_path, str(e))

            result = self._decode_lines(lines)
            for error in result.rejected:
                logger.info(
                    error.message,
                    extra={"data_file": str(self.file_path), "line_number": error.line_number},
                )
            return result

    def save(self, travels: Sequence[Travel]) -> None:
        """Replace the file content with ``travels``.

        The records are written to a sibling temporary file which then
        replaces the target, so readers never see a half-written file.
        """
        tmp_path = self.file_path.with_name(f"{self.file_path.name}.tmp")
        with LoggingContext(
            entry_msg=f"Saving {len(travels)} travels to '{self.file_path}'",
            success_msg=f"Saved {len(travels)} travels to '{self.file_path}'",
            failure_msg=f"Failed to save travels to '{self.file_path}'",
            logger=logger,
            success_level=logging.DEBUG,
        ):
            try:
                with open(tmp_path, "w", encoding=self.encoding, newline="\n") as data_file:
                    data_file.write(self._encode_travels(travels))
                os.replace(tmp_path, self.file_path)
            except OSError as e:
                tmp_path.unlink(missing_ok=True)
                raise FileStorageError("write", self.file_path, str(e))

    def load_or_seed(self) -> LoadResult:
        """Load the file, falling back to the default travels.

        A missing file is created with the defaults. A file that exists but
        cannot be read is left untouched and the defaults are only used in
        memory; the error is kept on the result for the caller to report.
        """
        try:
            return self.load()
        except FileNotFoundError:
            logger.info(f"'{self.file_path}' not found, creating it with default travels")
            result = LoadResult(travels=self.default_travels(), seeded=True)
        except FileStorageError as e:
            logger.error(f"Using default travels, could not read '{self.file_path}': {e.message}")
            return LoadResult(travels=self.default_travels(), seeded=True, read_error=e)

        try:
            self.save(result.travels)
        except FileStorageError as e:
            result.write_error = e
        return result

    def default_travels(self) -> List[Travel]:
        return self._decode_lines(list(DEFAULT_TRAVEL_LINES)).travels

    @abstractmethod
    def _decode_lines(self, lines: List[str]) -> LoadResult:
        pass

    @abstractmethod
    def _encode_travels(self, travels: Sequence[Travel]) -> str:
        pass

from typing import List, Sequence, Set

from travelbook.constants import FIELD_DELIMITER, FIELDS_PER_RECORD
from travelbook.core.validation import (
    format_date,
    format_id,
    format_price,
    parse_date,
    parse_days,
    parse_id,
    parse_price,
    parse_vehicle,
)
from travelbook.exceptions import FieldValidationError, RecordFormatError
from travelbook.models import Travel

from .file_storage import FileStorage, LoadResult


class CsvStorage(FileStorage):
    """Stores one travel per line as ``id;city;dd/MM/yyyy;days;price;VEHICLE``."""

    def _decode_lines(self, lines: List[str]) -> LoadResult:
        result = LoadResult()
        seen_ids: Set[int] = set()

        for line_number, line in enumerate(lines, 1):
            if not line.strip():
                continue
            try:
                travel = self.decode_line(line, line_number)
            except RecordFormatError as e:
                result.rejected.append(e)
                continue

            if travel.id in seen_ids:
                result.rejected.append(
                    RecordFormatError(line_number, line, f"duplicate id {travel.id}")
                )
                continue

            seen_ids.add(travel.id)
            result.travels.append(travel)

        return result

    def _encode_travels(self, travels: Sequence[Travel]) -> str:
        return "".join(f"{self.encode_travel(travel)}\n" for travel in travels)

    @staticmethod
    def decode_line(line: str, line_number: int = 0) -> Travel:
        fields = line.split(FIELD_DELIMITER)
        if len(fields) != FIELDS_PER_RECORD:
            raise RecordFormatError(
                line_number,
                line,
                f"expected {FIELDS_PER_RECORD} fields, got {len(fields)}",
            )

        travel_id, city, travel_date, days, price, vehicle = fields
        try:
            return Travel(
                id=parse_id(travel_id),
                city=city,
                date=parse_date(travel_date),
                days=parse_days(days),
                price=parse_price(price),
                vehicle=parse_vehicle(vehicle),
            )
        except FieldValidationError as e:
            raise RecordFormatError(line_number, line, f"{e.field_name}: {e.value!r}")

    @staticmethod
    def encode_travel(travel: Travel) -> str:
        return FIELD_DELIMITER.join(
            [
                format_id(travel.id),
                travel.city,
                format_date(travel.date),
                str(travel.days),
                format_price(travel.price),
                travel.vehicle.value,
            ]
        )

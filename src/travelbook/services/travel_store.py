import logging
from decimal import Decimal
from typing import Iterable, Iterator, List, Optional

from travelbook.exceptions import DuplicateTravelError, TravelNotFoundError
from travelbook.models import Travel

logger = logging.getLogger(__name__)


class TravelStore:
    """Ordered in-memory collection of travels, addressable by id.

    The store keeps the order records were loaded or inserted in. The only
    ordering it enforces is on insert, where a new travel goes right before
    the first travel with a greater id.
    """

    def __init__(self, travels: Iterable[Travel] = ()):
        self._travels: List[Travel] = []
        for travel in travels:
            if self.contains(travel.id):
                raise DuplicateTravelError(travel.id)
            self._travels.append(travel)

    def __len__(self) -> int:
        return len(self._travels)

    def __iter__(self) -> Iterator[Travel]:
        return iter(list(self._travels))

    @property
    def records(self) -> List[Travel]:
        return list(self._travels)

    def contains(self, travel_id: int) -> bool:
        return self._index_of(travel_id) is not None

    def find_by_id(self, travel_id: int) -> Optional[Travel]:
        index = self._index_of(travel_id)
        return None if index is None else self._travels[index]

    def insert_sorted(self, travel: Travel) -> int:
        """Insert ``travel`` before the first travel with a greater id.

        Returns the position the travel was inserted at.
        """
        if self.contains(travel.id):
            raise DuplicateTravelError(travel.id)

        position = len(self._travels)
        for index, existing in enumerate(self._travels):
            if existing.id > travel.id:
                position = index
                break

        self._travels.insert(position, travel)
        logger.debug(f"Inserted travel {travel.id} at position {position}")
        return position

    def replace(self, travel_id: int, travel: Travel) -> None:
        index = self._index_of(travel_id)
        if index is None:
            raise TravelNotFoundError(travel_id)
        self._travels[index] = travel

    def remove_by_id(self, travel_id: int) -> bool:
        index = self._index_of(travel_id)
        if index is None:
            return False
        del self._travels[index]
        return True

    def sort_by_date(self) -> None:
        # list.sort is stable, ties keep their current relative order
        self._travels.sort(key=lambda travel: travel.date)

    def filter_by_max_price(self, threshold: Decimal) -> List[Travel]:
        return [travel for travel in self._travels if travel.price <= threshold]

    def average_price(self) -> Optional[Decimal]:
        """Mean price of all travels, or None when the store is empty."""
        if not self._travels:
            return None
        total = sum((travel.price for travel in self._travels), Decimal(0))
        return total / len(self._travels)

    def _index_of(self, travel_id: int) -> Optional[int]:
        for index, travel in enumerate(self._travels):
            if travel.id == travel_id:
                return index
        return None

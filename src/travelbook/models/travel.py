import enum
from dataclasses import dataclass, replace
import datetime
from decimal import Decimal
from typing import Optional


class Vehicle(enum.Enum):
    PLANE = "PLANE"
    BUS = "BUS"
    TRAIN = "TRAIN"
    BOAT = "BOAT"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Travel:
    id: int
    city: str
    date: datetime.date
    days: int
    price: Decimal
    vehicle: Vehicle

    def __str__(self) -> str:
        return f"{self.id} {self.city} ({self.date.isoformat()})"


@dataclass(frozen=True)
class TravelChanges:
    """Optional replacement values for an existing travel.

    A field left as None keeps the value of the travel being edited.
    """

    city: Optional[str] = None
    date: Optional[datetime.date] = None
    days: Optional[int] = None
    price: Optional[Decimal] = None
    vehicle: Optional[Vehicle] = None

    def is_empty(self) -> bool:
        return all(value is None for value in self._as_dict().values())

    def apply_to(self, travel: Travel) -> Travel:
        """Return a new travel with the supplied fields replaced."""
        changes = {k: v for k, v in self._as_dict().items() if v is not None}
        return replace(travel, **changes)

    def _as_dict(self):
        return {
            "city": self.city,
            "date": self.date,
            "days": self.days,
            "price": self.price,
            "vehicle": self.vehicle,
        }

"""
Travel domain models.

Immutable value types for travel records and the changes an edit applies.
"""

from .travel import Travel, TravelChanges, Vehicle

__all__ = [
    "Travel",
    "TravelChanges",
    "Vehicle",
]

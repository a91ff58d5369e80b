"""
Record services.

Contains the in-memory travel store that command handlers operate on.
"""

from .travel_store import TravelStore

__all__ = [
    "TravelStore",
]

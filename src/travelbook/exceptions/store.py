"""
Record store exceptions.
"""

from .base import ExceptionContext, TravelbookError


class StoreError(TravelbookError):
    """Base class for record store errors."""


class DuplicateTravelError(StoreError):
    """Raised when inserting a travel whose id is already stored."""

    def __init__(self, travel_id: int):
        self.travel_id = travel_id
        context = ExceptionContext(
            help_text="Travel ids must be unique; delete or edit the existing travel instead",
            error_code="DUPLICATE_TRAVEL",
        )
        super().__init__(f"Travel {travel_id} already exists", context)


class TravelNotFoundError(StoreError):
    """Raised when replacing a travel that is not stored."""

    def __init__(self, travel_id: int):
        self.travel_id = travel_id
        context = ExceptionContext(error_code="TRAVEL_NOT_FOUND")
        super().__init__(f"Travel {travel_id} not found", context)

"""
Travelbook: interactive travel record manager.

Keeps a small list of travels in a delimited text file and edits it through
line-oriented commands read from standard input.
"""

__version__ = "0.1.0"

from .models import Travel, TravelChanges, Vehicle
from .services import TravelStore

__all__ = [
    "__version__",
    "Travel",
    "TravelChanges",
    "TravelStore",
    "Vehicle",
]

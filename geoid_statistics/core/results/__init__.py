"""Result data structures for the statistics core."""

from .summary import LocationSummary

__all__ = [
    "LocationSummary",
]

"""Custom exception hierarchy for homecost."""

from __future__ import annotations


class HomeCostError(Exception):
    """Base exception for all homecost errors."""


class UnresolvableInputError(HomeCostError):
    """Raised when a year or floor area does not match any cost bracket."""

    def __init__(
        self,
        message: str,
        *,
        year: object = None,
        floor_area: object = None,
    ) -> None:
        super().__init__(message)
        self.year = year
        self.floor_area = floor_area

"""
exchange_rates/resource.py – The two API resources a request can target.
"""

from enum import Enum

from exchange_rates.errors import DateRangeError


class Resource(Enum):
    LATEST = "latest"
    HISTORY = "history"

    @property
    def path(self) -> str:
        return self.value

    @classmethod
    def for_dates(cls, start_at, end_at) -> "Resource":
        """
        Pick the resource implied by the date range.

        No dates -> LATEST, both dates -> HISTORY. A half-open range is
        rejected rather than filled in with a guessed date.
        """
        if start_at is None and end_at is None:
            return cls.LATEST
        if start_at is not None and end_at is not None:
            return cls.HISTORY

        missing = "end date" if end_at is None else "start date"
        raise DateRangeError(f"Inconsistent date range: {missing} is missing")

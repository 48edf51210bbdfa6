"""Damped window model with exponential decay."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Union

TimePoint = Union[int, float, datetime]


@dataclass
class DampedWindow:
    """Weights older data by ``base ** (-lambda_ * elapsed)``."""

    base: float
    lambda_: float

    def decay(self, start_time: TimePoint, current_time: TimePoint) -> float:
        """Return the decay factor between two time points.

        Datetimes are compared in whole microseconds; numbers are used as given.
        """
        if isinstance(start_time, datetime) and isinstance(current_time, datetime):
            elapsed = (current_time - start_time) // timedelta(microseconds=1)
        elif isinstance(start_time, datetime) or isinstance(current_time, datetime):
            raise TypeError("both time points must be datetimes or both numbers")
        else:
            elapsed = current_time - start_time
        return self.base ** (-1 * self.lambda_ * elapsed)


def create_damped_window(base: float, lambda_: float) -> DampedWindow:
    """Create a damped window with the given base and decay rate."""
    return DampedWindow(base, lambda_)
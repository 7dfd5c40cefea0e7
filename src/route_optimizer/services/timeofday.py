"""Time-of-day helpers.

Times are carried as minutes since midnight. Arithmetic past midnight wraps
around into the next day, so every value handed out lies in ``[0, 1440)``.
"""

from __future__ import annotations

import math

from ..errors import InvalidTimeOfDay

MINUTES_PER_DAY = 24 * 60


def parse_time_of_day(value: str | int | float) -> int:
    """Convert ``HH:MM`` (24-hour) or a minute-of-day number to minutes since midnight.

    Args:
        value: ``"HH:MM"`` string, or an integer/float minute of day.

    Returns:
        int: Minutes since midnight.

    Raises:
        InvalidTimeOfDay: If the format is invalid or the time is out of range.
    """
    if isinstance(value, bool):
        raise InvalidTimeOfDay(value)
    if isinstance(value, (int, float)):
        if not math.isfinite(value) or value != int(value) or not 0 <= value < MINUTES_PER_DAY:
            raise InvalidTimeOfDay(value)
        return int(value)
    if not isinstance(value, str):
        raise InvalidTimeOfDay(value)

    parts = value.strip().split(":")
    if len(parts) != 2 or not all(part.isdigit() for part in parts) or len(parts[1]) != 2:
        raise InvalidTimeOfDay(value)
    hours, minutes = (int(part) for part in parts)
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise InvalidTimeOfDay(value)
    return hours * 60 + minutes


def wrap_minutes(minutes: float) -> float:
    """Fold a minute count into a single day."""
    return minutes % MINUTES_PER_DAY


def add_minutes(time_of_day: float, minutes: float) -> float:
    return wrap_minutes(time_of_day + minutes)


def format_time_of_day(minutes: float) -> str:
    """Render minutes since midnight as ``HH:MM``, rounding to the nearest minute."""
    total = int(round(wrap_minutes(minutes))) % MINUTES_PER_DAY
    hours, mins = divmod(total, 60)
    return f"{hours:02d}:{mins:02d}"

"""Domain models for stops and their delivery windows."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Optional

from ..errors import IncompleteTimeWindow, InvalidCoordinateRange, InvalidTimeWindowOrder
from ..services.timeofday import format_time_of_day, parse_time_of_day


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """Inclusive delivery window, in minutes since midnight, within one day."""

    start_min: int
    end_min: int

    def __post_init__(self) -> None:
        if self.end_min <= self.start_min:
            raise InvalidTimeWindowOrder(format_time_of_day(self.start_min), format_time_of_day(self.end_min))

    @classmethod
    def from_bounds(cls, start: str | int | None, end: str | int | None) -> Optional["TimeWindow"]:
        """Build a window from optional bounds; both or neither must be given."""
        if start is None and end is None:
            return None
        if start is None or end is None:
            raise IncompleteTimeWindow()
        return cls(parse_time_of_day(start), parse_time_of_day(end))

    def contains(self, minute_of_day: float) -> bool:
        return self.start_min <= minute_of_day <= self.end_min

    @property
    def start(self) -> str:
        return format_time_of_day(self.start_min)

    @property
    def end(self) -> str:
        return format_time_of_day(self.end_min)


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A stop location. Never mutated once created."""

    latitude: float
    longitude: float
    time_window: Optional[TimeWindow] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def window_start(self) -> Optional[int]:
        return self.time_window.start_min if self.time_window else None

    @property
    def window_end(self) -> Optional[int]:
        return self.time_window.end_min if self.time_window else None


def validate_coordinate_range(latitude: float, longitude: float) -> None:
    """Reject latitude/longitude outside [-90, 90] / [-180, 180]."""

    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        raise InvalidCoordinateRange(latitude, longitude)

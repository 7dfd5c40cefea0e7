"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TimeWindowStatus(str, Enum):
    NO_WINDOW = "no_window"
    TOO_EARLY = "too_early"
    TOO_LATE = "too_late"
    ON_TIME = "on_time"

    @property
    def within_window(self) -> Optional[bool]:
        if self is TimeWindowStatus.NO_WINDOW:
            return None
        return self is TimeWindowStatus.ON_TIME


@dataclass(frozen=True, slots=True)
class RouteSegment:
    from_index: int
    to_index: int
    distance: float
    travel_time_min: float
    arrival_min: float
    departure_min: Optional[float]
    time_window_status: TimeWindowStatus

    @property
    def within_window(self) -> Optional[bool]:
        return self.time_window_status.within_window

    @property
    def is_return_leg(self) -> bool:
        return self.departure_min is None


@dataclass(frozen=True, slots=True)
class RouteDuration:
    hours: int
    minutes: int

    @classmethod
    def from_minutes(cls, total_minutes: float) -> "RouteDuration":
        hours, minutes = divmod(int(round(total_minutes)), 60)
        return cls(hours=hours, minutes=minutes)


@dataclass(frozen=True, slots=True)
class Route:
    hub_index: int
    stop_order: tuple[int, ...]
    segments: tuple[RouteSegment, ...]
    total_distance: float
    start_min: float
    end_min: float
    total_duration_min: float
    average_speed_mph: float
    stop_duration_minutes: float
    unit: str = "mi"

    @property
    def total_route_duration(self) -> RouteDuration:
        return RouteDuration.from_minutes(self.total_duration_min)

    @property
    def stop_count(self) -> int:
        return len(self.stop_order) - 1

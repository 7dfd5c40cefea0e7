"""Validation errors raised by the route optimizer.

Every error is a ``ValueError`` so callers (and the API layer) can keep a
single ``except ValueError`` branch for bad input.
"""

from __future__ import annotations


class RouteOptimizerError(ValueError):
    """Base class for all caller-facing validation failures."""


class InvalidCoordinateRange(RouteOptimizerError):
    def __init__(self, latitude: float, longitude: float) -> None:
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"Coordinates out of range: lat={latitude}, lon={longitude} "
            "(latitude must be within [-90, 90], longitude within [-180, 180])."
        )


class IncompleteTimeWindow(RouteOptimizerError):
    def __init__(self) -> None:
        super().__init__("Time window requires both window_start and window_end, or neither.")


class InvalidTimeWindowOrder(RouteOptimizerError):
    def __init__(self, start: str, end: str) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Time window end ({end}) must be later than its start ({start}).")


class InvalidTimeOfDay(RouteOptimizerError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid time of day: {value!r} (use HH:MM, 00:00-23:59).")


class InsufficientStops(RouteOptimizerError):
    def __init__(self, count: int, required: int = 2) -> None:
        self.count = count
        self.required = required
        super().__init__(f"At least {required} coordinates are required, got {count}.")


class InvalidSpeed(RouteOptimizerError):
    def __init__(self, speed: float) -> None:
        self.speed = speed
        super().__init__(f"Average speed must be positive, got {speed}.")


class InvalidHubIndex(RouteOptimizerError):
    def __init__(self, hub_index: int, size: int) -> None:
        self.hub_index = hub_index
        self.size = size
        super().__init__(f"Hub index {hub_index} is out of range for {size} stops.")


class CoordinateNotFound(RouteOptimizerError, KeyError):
    def __init__(self, coordinate_id: str) -> None:
        self.coordinate_id = coordinate_id
        super().__init__(f"Coordinate '{coordinate_id}' not found.")

    def __str__(self) -> str:
        return self.args[0]

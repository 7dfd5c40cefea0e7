"""Nearest-neighbour tour construction with a time-window schedule.

Starting at the hub, the tour always extends to the closest unvisited stop,
spends a fixed dwell time there, and finally returns to the hub. Each leg is
annotated with travel time, arrival/departure times and whether the arrival
falls inside the destination's delivery window.

Ties on distance go to the lowest stop index: candidates are scanned in index
order and only a strictly smaller distance replaces the current best.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...errors import InsufficientStops, InvalidHubIndex, InvalidSpeed
from ...models.domain import Coordinate
from ..timeofday import add_minutes, parse_time_of_day
from .models import Route, RouteSegment, TimeWindowStatus

STOP_DURATION_MINUTES = 15.0

logger = logging.getLogger(__name__)


def travel_time_minutes(distance: float, average_speed_mph: float) -> float:
    return (distance / average_speed_mph) * 60.0


def classify_arrival(coordinate: Coordinate, arrival_min: float) -> TimeWindowStatus:
    """Compare a minute-of-day arrival against the stop's inclusive window."""
    window = coordinate.time_window
    if window is None:
        return TimeWindowStatus.NO_WINDOW
    if window.contains(arrival_min):
        return TimeWindowStatus.ON_TIME
    if arrival_min < window.start_min:
        return TimeWindowStatus.TOO_EARLY
    return TimeWindowStatus.TOO_LATE


def _nearest_unvisited(row: Sequence[float], visited: Sequence[bool]) -> int:
    nearest = -1
    min_distance = math.inf
    for candidate, distance in enumerate(row):
        if visited[candidate]:
            continue
        if nearest == -1 or distance < min_distance:
            nearest = candidate
            min_distance = distance
    return nearest


def _validate_inputs(
    hub_index: int,
    matrix: Sequence[Sequence[float]],
    coordinates: Sequence[Coordinate],
    average_speed_mph: float,
) -> None:
    n = len(coordinates)
    if len(matrix) != n or any(len(row) != n for row in matrix):
        raise ValueError(f"Distance matrix must be {n}x{n} to match the coordinates.")
    if n < 2:
        raise InsufficientStops(n)
    if not 0 <= hub_index < n:
        raise InvalidHubIndex(hub_index, n)
    if not average_speed_mph > 0:
        raise InvalidSpeed(average_speed_mph)


def optimize_route(
    hub_index: int,
    matrix: Sequence[Sequence[float]],
    coordinates: Sequence[Coordinate],
    start_time: str | int,
    average_speed_mph: float,
    *,
    stop_duration_minutes: float = STOP_DURATION_MINUTES,
    unit: str = "mi",
) -> Route:
    """Build a greedy tour that starts and ends at ``hub_index``.

    Args:
        hub_index: Position of the hub in ``coordinates``.
        matrix: Square distance matrix aligned with ``coordinates``.
        coordinates: Stops, read only for their time windows.
        start_time: Departure from the hub, ``HH:MM`` or minute of day.
        average_speed_mph: Travel speed; must be positive.
        stop_duration_minutes: Dwell time at each non-hub stop.
        unit: Unit label of ``matrix`` distances, carried onto the route.

    Returns:
        Route with one segment per leg, the last one returning to the hub.

    Raises:
        InsufficientStops: Fewer than two stops.
        InvalidHubIndex: Hub index outside the stop range.
        InvalidSpeed: Non-positive speed.
        ValueError: Matrix and coordinates disagree on size.
    """
    _validate_inputs(hub_index, matrix, coordinates, average_speed_mph)
    start_min = parse_time_of_day(start_time)

    n = len(coordinates)
    visited = [False] * n
    visited[hub_index] = True
    current = hub_index
    current_time: float = start_min
    stop_order = [hub_index]
    segments: list[RouteSegment] = []
    total_distance = 0.0
    total_travel = 0.0

    for _ in range(n - 1):
        nearest = _nearest_unvisited(matrix[current], visited)
        distance = matrix[current][nearest]
        travel = travel_time_minutes(distance, average_speed_mph)
        arrival = add_minutes(current_time, travel)
        departure = add_minutes(arrival, stop_duration_minutes)

        segments.append(
            RouteSegment(
                from_index=current,
                to_index=nearest,
                distance=distance,
                travel_time_min=travel,
                arrival_min=arrival,
                departure_min=departure,
                time_window_status=classify_arrival(coordinates[nearest], arrival),
            )
        )
        visited[nearest] = True
        stop_order.append(nearest)
        total_distance += distance
        total_travel += travel
        current = nearest
        current_time = departure

    # Closing leg: no dwell at the hub, no window check.
    return_distance = matrix[current][hub_index]
    return_travel = travel_time_minutes(return_distance, average_speed_mph)
    end_min = add_minutes(current_time, return_travel)
    segments.append(
        RouteSegment(
            from_index=current,
            to_index=hub_index,
            distance=return_distance,
            travel_time_min=return_travel,
            arrival_min=end_min,
            departure_min=None,
            time_window_status=TimeWindowStatus.NO_WINDOW,
        )
    )
    stop_order.append(hub_index)
    total_distance += return_distance
    total_travel += return_travel

    total_duration = total_travel + (n - 1) * stop_duration_minutes
    route = Route(
        hub_index=hub_index,
        stop_order=tuple(stop_order),
        segments=tuple(segments),
        total_distance=round(total_distance, 2),
        start_min=start_min,
        end_min=end_min,
        total_duration_min=total_duration,
        average_speed_mph=average_speed_mph,
        stop_duration_minutes=stop_duration_minutes,
        unit=unit,
    )
    logger.info(
        "Nearest-neighbour route from hub %d over %d stops: %.2f %s, %.1f min",
        hub_index,
        n,
        route.total_distance,
        unit,
        total_duration,
    )
    return route

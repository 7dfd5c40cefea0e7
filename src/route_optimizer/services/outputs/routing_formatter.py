"""Serializers for distance matrices and routes."""

from __future__ import annotations

import csv
import io
from typing import Sequence

from ...models.domain import Coordinate
from ..distance.matrix import DistanceMatrix
from ..routing.models import Route, RouteSegment
from ..timeofday import format_time_of_day


def stop_label(index: int, hub_index: int | None = None) -> str:
    return "Hub" if index == hub_index else f"Stop {index + 1}"


def segment_to_json(segment: RouteSegment) -> dict:
    return {
        "from_index": segment.from_index,
        "to_index": segment.to_index,
        "distance": segment.distance,
        "travel_time_minutes": round(segment.travel_time_min, 2),
        "arrival_time": format_time_of_day(segment.arrival_min),
        "departure_time": format_time_of_day(segment.departure_min) if segment.departure_min is not None else None,
        "time_window_status": segment.time_window_status.value,
        "within_window": segment.within_window,
    }


def route_to_json(route: Route, coordinates: Sequence[Coordinate]) -> dict:
    duration = route.total_route_duration
    return {
        "hub_index": route.hub_index,
        "stop_order": list(route.stop_order),
        "coordinate_ids": [coordinates[index].id for index in route.stop_order],
        "segments": [segment_to_json(segment) for segment in route.segments],
        "total_distance": route.total_distance,
        "unit": route.unit,
        "start_time": format_time_of_day(route.start_min),
        "end_time": format_time_of_day(route.end_min),
        "total_route_duration": {"hours": duration.hours, "minutes": duration.minutes},
        "total_duration_minutes": round(route.total_duration_min, 2),
        "average_speed_mph": route.average_speed_mph,
        "stop_duration_minutes": route.stop_duration_minutes,
    }


def route_to_csv(route: Route, coordinates: Sequence[Coordinate]) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "leg",
        "from",
        "to",
        "to_coordinate_id",
        f"distance_{route.unit}",
        "travel_time_minutes",
        "arrival_time",
        "departure_time",
        "window_start",
        "window_end",
        "time_window_status",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for leg, segment in enumerate(route.segments, start=1):
        target = coordinates[segment.to_index]
        window = target.time_window if not segment.is_return_leg else None
        writer.writerow(
            {
                "leg": leg,
                "from": stop_label(segment.from_index, route.hub_index),
                "to": stop_label(segment.to_index, route.hub_index),
                "to_coordinate_id": target.id,
                f"distance_{route.unit}": f"{segment.distance:.2f}",
                "travel_time_minutes": f"{segment.travel_time_min:.2f}",
                "arrival_time": format_time_of_day(segment.arrival_min),
                "departure_time": format_time_of_day(segment.departure_min) if segment.departure_min is not None else "",
                "window_start": window.start if window else "",
                "window_end": window.end if window else "",
                "time_window_status": segment.time_window_status.value,
            }
        )
    return buffer.getvalue()


def matrix_to_csv(matrix: DistanceMatrix) -> str:
    """Render the matrix as a labelled table, one row per origin stop."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    labels = [stop_label(index) for index in range(len(matrix))]
    writer.writerow(["", *labels])
    for label, row in zip(labels, matrix):
        writer.writerow([label, *(f"{distance:.2f}" for distance in row)])
    return buffer.getvalue()

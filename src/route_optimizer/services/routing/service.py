"""Routing orchestration service.

Gates requests (stop count, identifiers), builds the distance matrix, runs
the nearest-neighbour optimizer and maps results onto response schemas.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ...config import settings
from ...errors import InsufficientStops, RouteOptimizerError
from ...models.domain import Coordinate
from ...schemas.distances import DistanceMatrixRequest, DistanceMatrixResponse
from ...schemas.routing import RouteOptions, RoutingRequest, RoutingResponse
from ..distance.matrix import DistanceMatrix, build_distance_matrix
from ..outputs.geojson import route_path, route_to_geojson
from ..outputs.routing_formatter import matrix_to_csv, route_to_csv, route_to_json
from ..session import CoordinateSession
from .models import Route
from .nearest_neighbor import optimize_route

logger = logging.getLogger(__name__)


def _require_stops(coordinates: Sequence[Coordinate]) -> None:
    if len(coordinates) < 2:
        logger.warning("Rejected request with %d coordinate(s)", len(coordinates))
        raise InsufficientStops(len(coordinates))
    if len(coordinates) > settings.max_coordinates:
        raise RouteOptimizerError(
            f"Too many coordinates: {len(coordinates)} (limit is {settings.max_coordinates})."
        )


def _to_coordinates(payload: DistanceMatrixRequest | RoutingRequest) -> tuple[Coordinate, ...]:
    coordinates = tuple(item.to_domain() for item in payload.coordinates)
    seen: set[str] = set()
    for coordinate in coordinates:
        if coordinate.id in seen:
            raise RouteOptimizerError(f"Duplicate coordinate id '{coordinate.id}'.")
        seen.add(coordinate.id)
    _require_stops(coordinates)
    return coordinates


def _matrix_response(coordinates: Sequence[Coordinate], matrix: DistanceMatrix, unit: str) -> DistanceMatrixResponse:
    return DistanceMatrixResponse(
        unit=unit,
        size=len(matrix),
        coordinate_ids=[coordinate.id for coordinate in coordinates],
        matrix=[list(row) for row in matrix],
    )


def _solve(
    coordinates: Sequence[Coordinate],
    matrix: DistanceMatrix,
    options: RouteOptions,
    unit: str,
) -> Route:
    return optimize_route(
        options.hub_index,
        matrix,
        coordinates,
        options.start_time or settings.default_start_time,
        options.average_speed_mph or settings.default_average_speed_mph,
        stop_duration_minutes=settings.stop_duration_minutes,
        unit=unit,
    )


def _route_response(route: Route, coordinates: Sequence[Coordinate]) -> RoutingResponse:
    payload = route_to_json(route, coordinates)
    payload["metadata"] = {
        "algorithm": "nearest_neighbor",
        "stop_count": route.stop_count,
        "time_window_summary": _window_summary(route),
        "map_overlays": {"route": {"coordinates": route_path(route, coordinates)}},
    }
    return RoutingResponse(**payload)


def _window_summary(route: Route) -> dict[str, int]:
    summary: dict[str, int] = {}
    for segment in route.segments:
        if segment.is_return_leg:
            continue
        status = segment.time_window_status.value
        summary[status] = summary.get(status, 0) + 1
    return summary


def _plan(payload: RoutingRequest) -> tuple[tuple[Coordinate, ...], Route]:
    coordinates = _to_coordinates(payload)
    unit = payload.unit or settings.distance_unit
    matrix = build_distance_matrix(coordinates, unit=unit)
    return coordinates, _solve(coordinates, matrix, payload, unit)


def compute_distance_matrix(payload: DistanceMatrixRequest) -> DistanceMatrixResponse:
    coordinates = _to_coordinates(payload)
    unit = payload.unit or settings.distance_unit
    matrix = build_distance_matrix(coordinates, unit=unit)
    logger.info("Computed distance matrix for %d coordinates", len(coordinates))
    return _matrix_response(coordinates, matrix, unit)


def compute_distance_matrix_csv(payload: DistanceMatrixRequest) -> str:
    coordinates = _to_coordinates(payload)
    return matrix_to_csv(build_distance_matrix(coordinates, unit=payload.unit or settings.distance_unit))


def optimize(payload: RoutingRequest) -> RoutingResponse:
    coordinates, route = _plan(payload)
    return _route_response(route, coordinates)


def optimize_csv(payload: RoutingRequest) -> str:
    coordinates, route = _plan(payload)
    return route_to_csv(route, coordinates)


def optimize_geojson(payload: RoutingRequest) -> dict:
    coordinates, route = _plan(payload)
    return route_to_geojson(route, coordinates)


def session_distance_matrix(session: CoordinateSession) -> DistanceMatrixResponse:
    coordinates, matrix = session.snapshot()
    _require_stops(coordinates)
    return _matrix_response(coordinates, matrix, session.unit)


def optimize_session(session: CoordinateSession, options: RouteOptions) -> RoutingResponse:
    coordinates, matrix = session.snapshot()
    _require_stops(coordinates)
    route = _solve(coordinates, matrix, options, session.unit)
    return _route_response(route, coordinates)

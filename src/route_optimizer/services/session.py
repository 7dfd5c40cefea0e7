"""In-memory coordinate session.

Holds the stops the dispatcher has entered for the lifetime of the process.
The distance matrix is cached and dropped whenever the coordinate set
changes, so it is always rebuilt wholesale.
"""

from __future__ import annotations

import logging
import threading

from ..config import settings
from ..errors import CoordinateNotFound, RouteOptimizerError
from ..models.domain import Coordinate, validate_coordinate_range
from .distance.matrix import DistanceMatrix, build_distance_matrix
from .geospatial import DistanceUnit

logger = logging.getLogger(__name__)


class CoordinateSession:
    def __init__(self, *, unit: DistanceUnit | None = None, max_coordinates: int | None = None) -> None:
        self.unit: DistanceUnit = unit or settings.distance_unit
        self.max_coordinates = max_coordinates if max_coordinates is not None else settings.max_coordinates
        self._coordinates: list[Coordinate] = []
        self._matrix: DistanceMatrix | None = None
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._coordinates)

    def coordinates(self) -> tuple[Coordinate, ...]:
        with self._lock:
            return tuple(self._coordinates)

    def add(self, coordinate: Coordinate) -> Coordinate:
        validate_coordinate_range(coordinate.latitude, coordinate.longitude)
        with self._lock:
            if any(existing.id == coordinate.id for existing in self._coordinates):
                raise RouteOptimizerError(f"Coordinate '{coordinate.id}' already exists.")
            if len(self._coordinates) >= self.max_coordinates:
                raise RouteOptimizerError(f"Session is limited to {self.max_coordinates} coordinates.")
            self._coordinates.append(coordinate)
            self._matrix = None
        logger.info("Added coordinate %s (%.6f, %.6f)", coordinate.id, coordinate.latitude, coordinate.longitude)
        return coordinate

    def remove(self, coordinate_id: str) -> Coordinate:
        with self._lock:
            for position, existing in enumerate(self._coordinates):
                if existing.id == coordinate_id:
                    del self._coordinates[position]
                    self._matrix = None
                    break
            else:
                raise CoordinateNotFound(coordinate_id)
        logger.info("Removed coordinate %s", coordinate_id)
        return existing

    def clear(self) -> None:
        with self._lock:
            self._coordinates.clear()
            self._matrix = None

    def snapshot(self) -> tuple[tuple[Coordinate, ...], DistanceMatrix]:
        """Return the current coordinates together with their (cached) distance matrix."""
        with self._lock:
            coordinates = tuple(self._coordinates)
            if self._matrix is None:
                self._matrix = build_distance_matrix(coordinates, unit=self.unit)
            return coordinates, self._matrix

"""Pairwise great-circle distance matrix."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import Coordinate
from ..geospatial import DistanceUnit, earth_radius, haversine

DistanceMatrix = tuple[tuple[float, ...], ...]

logger = logging.getLogger(__name__)


def build_distance_matrix(coordinates: Sequence[Coordinate], *, unit: DistanceUnit = "mi") -> DistanceMatrix:
    """Build the symmetric n x n matrix of Haversine distances, rounded to 2 decimals.

    Diagonal cells are exactly 0 and never go through the formula. Only the
    upper triangle is computed; the lower triangle mirrors it.

    Args:
        coordinates: Stops in index order. Ranges are not re-validated here.
        unit: ``"mi"`` (default) or ``"km"``.

    Returns:
        Immutable matrix where ``matrix[i][j]`` is the distance from stop i to stop j.
    """
    radius = earth_radius(unit)
    n = len(coordinates)
    rows = [[0.0] * n for _ in range(n)]

    for i in range(n):
        origin = coordinates[i]
        for j in range(i + 1, n):
            target = coordinates[j]
            distance = round(
                haversine(origin.latitude, origin.longitude, target.latitude, target.longitude, radius=radius),
                2,
            )
            rows[i][j] = distance
            rows[j][i] = distance

    logger.debug("Built %dx%d distance matrix (%s)", n, n, unit)
    return tuple(tuple(row) for row in rows)

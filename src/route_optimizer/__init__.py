"""Single-vehicle route planning over great-circle distances."""

from .models.domain import Coordinate, TimeWindow
from .services.distance.matrix import build_distance_matrix
from .services.routing.nearest_neighbor import STOP_DURATION_MINUTES, optimize_route

__all__ = [
    "Coordinate",
    "TimeWindow",
    "build_distance_matrix",
    "optimize_route",
    "STOP_DURATION_MINUTES",
]

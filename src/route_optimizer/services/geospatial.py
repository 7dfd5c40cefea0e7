"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Literal

EARTH_RADIUS_MILES = 3959.0
EARTH_RADIUS_KM = 6371.0

DistanceUnit = Literal["mi", "km"]

_EARTH_RADIUS_BY_UNIT: dict[str, float] = {
    "mi": EARTH_RADIUS_MILES,
    "km": EARTH_RADIUS_KM,
}


def earth_radius(unit: DistanceUnit = "mi") -> float:
    try:
        return _EARTH_RADIUS_BY_UNIT[unit]
    except KeyError:
        raise ValueError(f"Unsupported distance unit '{unit}' (expected one of {sorted(_EARTH_RADIUS_BY_UNIT)}).") from None


def haversine(lat1: float, lon1: float, lat2: float, lon2: float, *, radius: float = EARTH_RADIUS_MILES) -> float:
    """Compute great-circle distance between two coordinates using the Haversine formula.

    atan2 keeps the result stable for both near-zero and near-antipodal pairs.
    Inputs are not range-checked and NaN propagates to the result.
    """

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push a just past 1 for antipodal pairs; NaN passes through max/min unchanged.
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return radius * c

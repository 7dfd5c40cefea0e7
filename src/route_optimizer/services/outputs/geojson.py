"""GeoJSON export of an optimized route."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from shapely.geometry import LineString, Point, mapping

from ...models.domain import Coordinate
from ..routing.models import Route
from ..timeofday import format_time_of_day
from .routing_formatter import stop_label


def route_path(route: Route, coordinates: Sequence[Coordinate]) -> List[List[float]]:
    """Ordered [lat, lon] pairs along the tour, hub to hub."""
    return [[coordinates[index].latitude, coordinates[index].longitude] for index in route.stop_order]


def route_to_geojson(route: Route, coordinates: Sequence[Coordinate]) -> Dict[str, Any]:
    """Convert a route into a FeatureCollection: one LineString plus a Point per stop.

    GeoJSON uses lon,lat order (x,y).
    """
    line = LineString([(coordinates[index].longitude, coordinates[index].latitude) for index in route.stop_order])
    features: List[Dict[str, Any]] = [
        {
            "type": "Feature",
            "geometry": mapping(line),
            "properties": {
                "kind": "route",
                "hub_index": route.hub_index,
                "total_distance": route.total_distance,
                "unit": route.unit,
                "start_time": format_time_of_day(route.start_min),
                "end_time": format_time_of_day(route.end_min),
            },
        }
    ]

    arrivals = {segment.to_index: segment for segment in route.segments if not segment.is_return_leg}
    for sequence, index in enumerate(route.stop_order[:-1]):
        coordinate = coordinates[index]
        segment = arrivals.get(index)
        properties: Dict[str, Any] = {
            "kind": "hub" if index == route.hub_index else "stop",
            "label": stop_label(index, route.hub_index),
            "coordinate_id": coordinate.id,
            "sequence": sequence,
        }
        if segment is not None:
            properties["arrival_time"] = format_time_of_day(segment.arrival_min)
            properties["time_window_status"] = segment.time_window_status.value
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(Point(coordinate.longitude, coordinate.latitude)),
                "properties": properties,
            }
        )

    return {"type": "FeatureCollection", "features": features}

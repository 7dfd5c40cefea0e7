from .geojson import route_path, route_to_geojson
from .routing_formatter import matrix_to_csv, route_to_csv, route_to_json

__all__ = ["matrix_to_csv", "route_path", "route_to_csv", "route_to_geojson", "route_to_json"]

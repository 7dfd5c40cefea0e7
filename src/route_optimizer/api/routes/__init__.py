"""Route group exports."""

from . import coordinates, distances, health, routes

__all__ = ["coordinates", "distances", "health", "routes"]

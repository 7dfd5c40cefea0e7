"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..errors import InvalidSpeed
from ..services.timeofday import format_time_of_day, parse_time_of_day
from .coordinates import CoordinateInput


class RouteOptions(BaseModel):
    """Parameters shared by every route request."""

    hub_index: int = Field(default=0, ge=0, description="Position of the hub (start/end stop).")
    start_time: Optional[str] = Field(default=None, description="Departure from the hub (HH:MM).")
    average_speed_mph: Optional[float] = Field(default=None, allow_inf_nan=False)

    @field_validator("start_time", mode="before")
    @classmethod
    def _normalize_start_time(cls, value: object) -> Optional[str]:
        if value is None:
            return None
        return format_time_of_day(parse_time_of_day(value))

    @field_validator("average_speed_mph")
    @classmethod
    def _positive_speed(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise InvalidSpeed(value)
        return value


class SessionRouteRequest(RouteOptions):
    pass


class RoutingRequest(RouteOptions):
    coordinates: List[CoordinateInput]
    unit: Optional[Literal["mi", "km"]] = None


class RouteSegmentModel(BaseModel):
    from_index: int
    to_index: int
    distance: float
    travel_time_minutes: float
    arrival_time: str
    departure_time: Optional[str] = None
    time_window_status: Literal["no_window", "too_early", "too_late", "on_time"]
    within_window: Optional[bool] = None


class RouteDurationModel(BaseModel):
    hours: int
    minutes: int


class RoutingResponse(BaseModel):
    hub_index: int
    stop_order: List[int]
    coordinate_ids: List[str]
    segments: List[RouteSegmentModel]
    total_distance: float
    unit: str
    start_time: str
    end_time: str
    total_route_duration: RouteDurationModel
    total_duration_minutes: float
    average_speed_mph: float
    stop_duration_minutes: float
    metadata: dict

"""Coordinate request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.domain import Coordinate, TimeWindow, validate_coordinate_range
from ..services.timeofday import format_time_of_day, parse_time_of_day


class CoordinateInput(BaseModel):
    """A stop as entered by the dispatcher."""

    id: Optional[str] = Field(default=None, description="Caller-supplied identifier; generated when omitted.")
    latitude: float = Field(..., allow_inf_nan=False, description="Decimal degrees, -90 to 90.")
    longitude: float = Field(..., allow_inf_nan=False, description="Decimal degrees, -180 to 180.")
    window_start: Optional[str] = Field(default=None, description="Delivery window start (HH:MM).")
    window_end: Optional[str] = Field(default=None, description="Delivery window end (HH:MM).")

    @field_validator("window_start", "window_end", mode="before")
    @classmethod
    def _normalize_time(cls, value: object) -> Optional[str]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return format_time_of_day(parse_time_of_day(value))

    @model_validator(mode="after")
    def _check_ranges(self) -> "CoordinateInput":
        validate_coordinate_range(self.latitude, self.longitude)
        TimeWindow.from_bounds(self.window_start, self.window_end)
        return self

    def to_domain(self) -> Coordinate:
        window = TimeWindow.from_bounds(self.window_start, self.window_end)
        if self.id:
            return Coordinate(latitude=self.latitude, longitude=self.longitude, time_window=window, id=self.id)
        return Coordinate(latitude=self.latitude, longitude=self.longitude, time_window=window)


class CoordinateModel(BaseModel):
    id: str
    latitude: float
    longitude: float
    window_start: Optional[str] = None
    window_end: Optional[str] = None

    @classmethod
    def from_domain(cls, coordinate: Coordinate) -> "CoordinateModel":
        window = coordinate.time_window
        return cls(
            id=coordinate.id,
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            window_start=window.start if window else None,
            window_end=window.end if window else None,
        )


class CoordinateListResponse(BaseModel):
    count: int
    coordinates: List[CoordinateModel]

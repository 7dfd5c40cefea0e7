"""Distance matrix request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .coordinates import CoordinateInput


class DistanceMatrixRequest(BaseModel):
    coordinates: List[CoordinateInput]
    unit: Optional[Literal["mi", "km"]] = Field(
        default=None,
        description="Distance unit; falls back to the configured default.",
    )


class DistanceMatrixResponse(BaseModel):
    unit: str
    size: int
    coordinate_ids: List[str]
    matrix: List[List[float]]

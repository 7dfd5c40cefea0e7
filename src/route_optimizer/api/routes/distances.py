"""Distance matrix endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from ...schemas.distances import DistanceMatrixRequest, DistanceMatrixResponse
from ...services.routing import service as routing_service

router = APIRouter(prefix="/distances", tags=["distances"])

logger = logging.getLogger(__name__)


@router.post("/matrix", response_model=DistanceMatrixResponse, status_code=status.HTTP_200_OK)
def distance_matrix(payload: DistanceMatrixRequest) -> DistanceMatrixResponse:
    try:
        return routing_service.compute_distance_matrix(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error computing distance matrix: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to compute distance matrix: {str(exc)}",
        ) from exc


@router.post("/matrix/csv", status_code=status.HTTP_200_OK)
def distance_matrix_csv(payload: DistanceMatrixRequest) -> Response:
    try:
        content = routing_service.compute_distance_matrix_csv(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="distance_matrix.csv"'},
    )

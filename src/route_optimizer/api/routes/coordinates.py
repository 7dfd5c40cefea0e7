"""Session coordinate endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ...errors import CoordinateNotFound
from ...schemas.coordinates import CoordinateInput, CoordinateListResponse, CoordinateModel
from ...schemas.distances import DistanceMatrixResponse
from ...schemas.routing import RoutingResponse, SessionRouteRequest
from ...services.routing import service as routing_service
from ...services.session import CoordinateSession
from ..dependencies import get_session

router = APIRouter(prefix="/coordinates", tags=["coordinates"])

logger = logging.getLogger(__name__)


@router.get("", response_model=CoordinateListResponse, status_code=status.HTTP_200_OK)
def list_coordinates(session: CoordinateSession = Depends(get_session)) -> CoordinateListResponse:
    coordinates = session.coordinates()
    return CoordinateListResponse(
        count=len(coordinates),
        coordinates=[CoordinateModel.from_domain(coordinate) for coordinate in coordinates],
    )


@router.post("", response_model=CoordinateModel, status_code=status.HTTP_201_CREATED)
def add_coordinate(payload: CoordinateInput, session: CoordinateSession = Depends(get_session)) -> CoordinateModel:
    try:
        coordinate = session.add(payload.to_domain())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return CoordinateModel.from_domain(coordinate)


@router.delete("/{coordinate_id}", response_model=CoordinateModel, status_code=status.HTTP_200_OK)
def remove_coordinate(coordinate_id: str, session: CoordinateSession = Depends(get_session)) -> CoordinateModel:
    """Remove a coordinate from the session by its identifier."""
    try:
        removed = session.remove(coordinate_id)
    except CoordinateNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return CoordinateModel.from_domain(removed)


@router.delete("", status_code=status.HTTP_200_OK)
def clear_coordinates(session: CoordinateSession = Depends(get_session)) -> dict:
    removed = len(session)
    session.clear()
    return {"success": True, "removed": removed}


@router.get("/matrix", response_model=DistanceMatrixResponse, status_code=status.HTTP_200_OK)
def session_matrix(session: CoordinateSession = Depends(get_session)) -> DistanceMatrixResponse:
    try:
        return routing_service.session_distance_matrix(session)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/route", response_model=RoutingResponse, status_code=status.HTTP_200_OK)
def session_route(
    payload: SessionRouteRequest,
    session: CoordinateSession = Depends(get_session),
) -> RoutingResponse:
    try:
        return routing_service.optimize_session(session, payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error optimizing session route: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}",
        ) from exc

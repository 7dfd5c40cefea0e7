"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from ...schemas.routing import RoutingRequest, RoutingResponse
from ...services.routing import service as routing_service

router = APIRouter(prefix="/routes", tags=["routes"])

logger = logging.getLogger(__name__)


@router.post("/optimize", response_model=RoutingResponse, status_code=status.HTTP_200_OK)
def optimize(payload: RoutingRequest) -> RoutingResponse:
    try:
        return routing_service.optimize(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error optimizing route: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}",
        ) from exc


@router.post("/optimize/csv", status_code=status.HTTP_200_OK)
def optimize_csv(payload: RoutingRequest) -> Response:
    """Optimized route as a CSV table, one row per leg."""
    try:
        content = routing_service.optimize_csv(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error exporting route CSV: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export route: {str(exc)}",
        ) from exc
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="route.csv"'},
    )


@router.post("/optimize/geojson", status_code=status.HTTP_200_OK)
def optimize_geojson(payload: RoutingRequest) -> dict:
    """Optimized route as a GeoJSON FeatureCollection for map display."""
    try:
        return routing_service.optimize_geojson(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error exporting route GeoJSON: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export route: {str(exc)}",
        ) from exc

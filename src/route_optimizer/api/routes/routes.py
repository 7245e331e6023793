"""Routing endpoints."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from fastapi import APIRouter, HTTPException, Query, status

from ...data.deliveries_repository import get_pending_deliveries
from ...models.domain import Coordinate, Stop
from ...schemas.routing import (
    FormattedValuesResponse,
    NavigationLinksModel,
    OptimizedRouteResponse,
    OptimizeRouteRequest,
    PendingOptimizeRequest,
    StopModel,
)
from ...services.navigation import build_navigation_url, build_route_url
from ...services.outputs.formatter import format_distance, format_duration
from ...services.routing.service import optimize_route

router = APIRouter(prefix="/routes", tags=["routes"])
logger = logging.getLogger(__name__)


def _optimize(
    stops: Sequence[Stop],
    current_location: Optional[Coordinate],
    max_passes: Optional[int],
) -> OptimizedRouteResponse:
    route = optimize_route(stops, current_location, max_passes=max_passes)
    navigation = NavigationLinksModel()
    if route.stops:
        first = route.stops[0]
        navigation = NavigationLinksModel(
            next_stop=build_navigation_url(first.lat, first.lng, label=first.name),
            full_route=build_route_url(route.stops, origin=current_location),
        )
    return OptimizedRouteResponse.from_domain(route, navigation)


def _load_pending(driver_id: str) -> tuple[Stop, ...]:
    try:
        return get_pending_deliveries(driver_id)
    except (FileNotFoundError, ValueError) as exc:
        logger.exception("Failed to load pending deliveries for driver %s", driver_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load pending deliveries: {str(exc)}",
        ) from exc


@router.post("/optimize", response_model=OptimizedRouteResponse, status_code=status.HTTP_200_OK)
def optimize(payload: OptimizeRouteRequest) -> OptimizedRouteResponse:
    stops = [stop.to_domain() for stop in payload.stops]
    current_location = payload.current_location.to_domain() if payload.current_location else None
    try:
        return _optimize(stops, current_location, payload.max_passes)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error optimizing route: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}",
        ) from exc


@router.get("/pending/{driver_id}", response_model=List[StopModel], status_code=status.HTTP_200_OK)
def pending_deliveries(driver_id: str) -> List[StopModel]:
    """List the stops still waiting for the driver, in assignment order."""
    return [StopModel.from_domain(stop) for stop in _load_pending(driver_id)]


@router.post(
    "/pending/{driver_id}/optimize",
    response_model=OptimizedRouteResponse,
    status_code=status.HTTP_200_OK,
)
def optimize_pending(driver_id: str, payload: Optional[PendingOptimizeRequest] = None) -> OptimizedRouteResponse:
    payload = payload or PendingOptimizeRequest()
    stops = _load_pending(driver_id)
    current_location = payload.current_location.to_domain() if payload.current_location else None
    try:
        return _optimize(stops, current_location, payload.max_passes)
    except Exception as exc:
        logger.exception("Error optimizing route for driver %s: %s", driver_id, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}",
        ) from exc


@router.get("/format", response_model=FormattedValuesResponse, status_code=status.HTTP_200_OK)
def format_values(
    distance_km: Optional[float] = Query(default=None, ge=0),
    duration_min: Optional[float] = Query(default=None, ge=0),
) -> FormattedValuesResponse:
    return FormattedValuesResponse(
        distance=format_distance(distance_km) if distance_km is not None else None,
        duration=format_duration(duration_min) if duration_min is not None else None,
    )

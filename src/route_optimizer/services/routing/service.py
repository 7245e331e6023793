"""Route optimization pipeline."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import Coordinate, Stop
from ..geospatial import build_distance_matrix
from .constructor import construct_route
from .metrics import (
    build_segment,
    build_segments,
    compute_savings,
    round_half_up,
    route_length,
    stop_duration,
)
from .models import OptimizedRoute, Savings
from .refiner import two_opt

logger = logging.getLogger(__name__)


def _current_location_stop(location: Coordinate) -> Stop:
    return Stop(
        id=settings.current_location_id,
        name="Current location",
        address="My position",
        lat=location.lat,
        lng=location.lng,
        type="pickup",
    )


def optimize_route(
    stops: Sequence[Stop],
    current_location: Optional[Coordinate] = None,
    *,
    max_passes: Optional[int] = None,
) -> OptimizedRoute:
    """Order ``stops`` to shorten the tour and report the savings.

    When ``current_location`` is given the tour is anchored at a synthetic stop
    placed there; that stop never appears in the returned ``stops`` and the leg
    from it is reported as ``approach``. Otherwise the first input stop is the
    anchor. Caller-owned stops are returned as-is, never copied or mutated.
    """

    if not stops:
        return OptimizedRoute(stops=[], total_distance=0, total_duration=0, savings=Savings(), segments=[])

    anchor = _current_location_stop(current_location) if current_location is not None else None
    all_stops: list[Stop] = [anchor, *stops] if anchor else list(stops)

    distance_matrix = build_distance_matrix(all_stops)
    naive_distance = route_length(range(len(all_stops)), distance_matrix)

    route = construct_route(all_stops, distance_matrix)
    route = two_opt(
        route,
        distance_matrix,
        max_passes=max_passes if max_passes is not None else settings.max_two_opt_passes,
    )
    optimized_distance = route_length(route, distance_matrix)

    ordered = [all_stops[index] for index in route]
    if anchor is not None:
        ordered = ordered[1:]

    segments = build_segments(ordered)
    approach = build_segment(anchor, ordered[0]) if anchor is not None else None
    legs = [approach, *segments] if approach else segments

    total_distance = round_half_up(sum(leg.distance for leg in legs), 1)
    total_duration = sum(leg.duration for leg in legs) + sum(stop_duration(stop) for stop in ordered)
    savings = compute_savings(naive_distance, optimized_distance)

    logger.info(
        "Optimized %d stops: %.1f km -> %.1f km (saved %s%%)",
        len(ordered),
        naive_distance,
        optimized_distance,
        savings.percentage,
    )
    return OptimizedRoute(
        stops=ordered,
        total_distance=total_distance,
        total_duration=total_duration,
        savings=savings,
        segments=segments,
        approach=approach,
    )

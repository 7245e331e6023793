"""Per-leg segments, totals and savings for an ordered route."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import Stop
from ..geospatial import stop_distance_km
from .models import Savings, Segment


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a browser's ``Math.round``; NaN and infinities pass through."""

    if not math.isfinite(value):
        return value
    scale = 10**digits
    rounded = math.floor(value * scale + 0.5) / scale
    return int(rounded) if digits == 0 else rounded


def estimate_duration(distance_km: float, average_speed_kmh: Optional[float] = None) -> float:
    """Travel minutes for ``distance_km`` at a flat average speed."""

    speed = average_speed_kmh or settings.average_speed_kmh
    return distance_km / speed * 60


def stop_duration(stop: Stop) -> float:
    if stop.estimated_duration is None:
        return settings.default_stop_duration_minutes
    return stop.estimated_duration


def route_length(route: Sequence[int], distance_matrix: Sequence[Sequence[float]]) -> float:
    return sum(distance_matrix[route[k]][route[k + 1]] for k in range(len(route) - 1))


def build_segment(origin: Stop, destination: Stop) -> Segment:
    distance = stop_distance_km(origin, destination)
    return Segment(
        from_stop=origin,
        to_stop=destination,
        distance=round_half_up(distance, 1),
        duration=round_half_up(estimate_duration(distance)),
    )


def build_segments(ordered_stops: Sequence[Stop]) -> list[Segment]:
    return [build_segment(ordered_stops[k], ordered_stops[k + 1]) for k in range(len(ordered_stops) - 1)]


def compute_savings(naive_distance: float, optimized_distance: float) -> Savings:
    """Savings of the optimized tour over the naive one, floored at zero."""

    distance_saved = round_half_up(naive_distance - optimized_distance, 1)
    time_saved = round_half_up(estimate_duration(distance_saved))
    percentage = round_half_up(distance_saved / naive_distance * 100) if naive_distance > 0 else 0
    return Savings(
        distance=max(0, distance_saved),
        time=max(0, time_saved),
        percentage=max(0, percentage),
    )

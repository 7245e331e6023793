"""Human-readable renderings of distances and durations."""

from __future__ import annotations

import math

from ..routing.metrics import round_half_up


def format_distance(km: float) -> str:
    if km < 1:
        return f"{round_half_up(km * 1000)} m"
    return f"{round_half_up(km, 1):.1f} km"


def format_duration(minutes: float) -> str:
    if minutes < 60 or not math.isfinite(minutes):
        return f"{round_half_up(minutes)} min"
    hours = math.floor(minutes / 60)
    return f"{hours}h {round_half_up(minutes % 60)}min"

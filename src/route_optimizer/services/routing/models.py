"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ...models.domain import Stop


@dataclass(slots=True)
class Segment:
    from_stop: Stop
    to_stop: Stop
    distance: float  # km, 1 decimal
    duration: float  # minutes, whole


@dataclass(slots=True)
class Savings:
    distance: float = 0.0
    time: float = 0
    percentage: float = 0


@dataclass(slots=True)
class OptimizedRoute:
    stops: List[Stop]
    total_distance: float
    total_duration: float
    savings: Savings = field(default_factory=Savings)
    segments: List[Segment] = field(default_factory=list)
    approach: Optional[Segment] = None

    @property
    def stop_ids(self) -> list[str]:
        return [stop.id for stop in self.stops]

"""Domain models for delivery stops and positions."""

from dataclasses import dataclass
from typing import Literal, Optional

Priority = Literal["high", "normal", "low"]
StopType = Literal["pickup", "delivery"]


@dataclass(slots=True)
class TimeWindow:
    """Delivery window as ``HH:mm`` strings. Not consumed by the optimizer."""

    start: str
    end: str


@dataclass(slots=True)
class Stop:
    """A point the driver has to visit."""

    id: str
    name: str
    address: str
    lat: float
    lng: float
    type: StopType = "delivery"
    priority: Optional[Priority] = None
    time_window: Optional[TimeWindow] = None
    estimated_duration: Optional[float] = None  # minutes at stop

    @property
    def is_high_priority(self) -> bool:
        return self.priority == "high"


@dataclass(slots=True)
class Coordinate:
    lat: float
    lng: float

"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.domain import Coordinate, Stop, TimeWindow
from ..services.outputs.formatter import format_distance, format_duration
from ..services.routing.models import OptimizedRoute, Segment


class TimeWindowModel(BaseModel):
    start: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="HH:mm")
    end: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="HH:mm")


class CoordinateModel(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    def to_domain(self) -> Coordinate:
        return Coordinate(lat=self.lat, lng=self.lng)


class StopModel(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = ""
    address: str = ""
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    type: Literal["pickup", "delivery"] = "delivery"
    priority: Optional[Literal["high", "normal", "low"]] = None
    time_window: Optional[TimeWindowModel] = None
    estimated_duration: Optional[float] = Field(default=None, ge=0, description="Minutes spent at the stop.")

    def to_domain(self) -> Stop:
        return Stop(
            id=self.id,
            name=self.name,
            address=self.address,
            lat=self.lat,
            lng=self.lng,
            type=self.type,
            priority=self.priority,
            time_window=TimeWindow(start=self.time_window.start, end=self.time_window.end)
            if self.time_window
            else None,
            estimated_duration=self.estimated_duration,
        )

    @classmethod
    def from_domain(cls, stop: Stop) -> "StopModel":
        return cls(
            id=stop.id,
            name=stop.name,
            address=stop.address,
            lat=stop.lat,
            lng=stop.lng,
            type=stop.type,
            priority=stop.priority,
            time_window=TimeWindowModel(start=stop.time_window.start, end=stop.time_window.end)
            if stop.time_window
            else None,
            estimated_duration=stop.estimated_duration,
        )


class PendingOptimizeRequest(BaseModel):
    current_location: Optional[CoordinateModel] = None
    max_passes: Optional[int] = Field(default=None, ge=1, description="Upper bound on 2-opt passes.")


class OptimizeRouteRequest(PendingOptimizeRequest):
    stops: List[StopModel]

    @field_validator("stops")
    @classmethod
    def _unique_ids(cls, value: List[StopModel]) -> List[StopModel]:
        seen: set[str] = set()
        for stop in value:
            if stop.id in seen:
                raise ValueError(f"Duplicate stop id '{stop.id}'.")
            seen.add(stop.id)
        return value


class SegmentModel(BaseModel):
    from_id: str
    to_id: str
    distance_km: float
    duration_min: float

    @classmethod
    def from_domain(cls, segment: Segment) -> "SegmentModel":
        return cls(
            from_id=segment.from_stop.id,
            to_id=segment.to_stop.id,
            distance_km=segment.distance,
            duration_min=segment.duration,
        )


class SavingsModel(BaseModel):
    distance_km: float
    time_min: float
    percentage: float


class RouteDisplayModel(BaseModel):
    total_distance: str
    total_duration: str
    distance_saved: str
    time_saved: str


class NavigationLinksModel(BaseModel):
    next_stop: Optional[str] = None
    full_route: Optional[str] = None


class OptimizedRouteResponse(BaseModel):
    stops: List[StopModel]
    segments: List[SegmentModel]
    approach: Optional[SegmentModel] = None
    total_distance_km: float
    total_duration_min: float
    savings: SavingsModel
    display: RouteDisplayModel
    navigation: NavigationLinksModel = Field(default_factory=NavigationLinksModel)

    @classmethod
    def from_domain(cls, route: OptimizedRoute, navigation: Optional[NavigationLinksModel] = None) -> "OptimizedRouteResponse":
        return cls(
            stops=[StopModel.from_domain(stop) for stop in route.stops],
            segments=[SegmentModel.from_domain(segment) for segment in route.segments],
            approach=SegmentModel.from_domain(route.approach) if route.approach else None,
            total_distance_km=route.total_distance,
            total_duration_min=route.total_duration,
            savings=SavingsModel(
                distance_km=route.savings.distance,
                time_min=route.savings.time,
                percentage=route.savings.percentage,
            ),
            display=RouteDisplayModel(
                total_distance=format_distance(route.total_distance),
                total_duration=format_duration(route.total_duration),
                distance_saved=format_distance(route.savings.distance),
                time_saved=format_duration(route.savings.time),
            ),
            navigation=navigation or NavigationLinksModel(),
        )


class FormattedValuesResponse(BaseModel):
    distance: Optional[str] = None
    duration: Optional[str] = None

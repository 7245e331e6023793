"""Delivery route optimization: stop ordering, savings and display helpers."""

from .models.domain import Coordinate, Stop, TimeWindow
from .services.outputs.formatter import format_distance, format_duration
from .services.routing.models import OptimizedRoute, Savings, Segment
from .services.routing.service import optimize_route

__all__ = [
    "Coordinate",
    "OptimizedRoute",
    "Savings",
    "Segment",
    "Stop",
    "TimeWindow",
    "format_distance",
    "format_duration",
    "optimize_route",
]

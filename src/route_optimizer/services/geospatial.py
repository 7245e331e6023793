"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

from ..models.domain import Stop

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def stop_distance_km(origin: Stop, destination: Stop) -> float:
    return haversine_km(origin.lat, origin.lng, destination.lat, destination.lng)


def build_distance_matrix(stops: Sequence[Stop]) -> list[list[float]]:
    """Return the symmetric pairwise distance matrix (km) with a zero diagonal.

    Coordinates are not validated: a NaN latitude yields NaN entries for every
    pair involving that stop.
    """

    count = len(stops)
    matrix = [[0.0] * count for _ in range(count)]
    for i in range(count):
        for j in range(i + 1, count):
            distance = stop_distance_km(stops[i], stops[j])
            matrix[i][j] = distance
            matrix[j][i] = distance
    return matrix

"""Initial tour construction: fixed anchor, urgent stops, then nearest neighbor."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...models.domain import Stop

logger = logging.getLogger(__name__)


def _nearest_unvisited(row: Sequence[float], visited: Sequence[bool]) -> int:
    nearest_index = -1
    nearest_distance = math.inf
    for index, distance in enumerate(row):
        if not visited[index] and distance < nearest_distance:
            nearest_distance = distance
            nearest_index = index
    if nearest_index == -1:
        # NaN distances never compare, keep input order so no stop is dropped
        nearest_index = visited.index(False)
    return nearest_index


def construct_route(stops: Sequence[Stop], distance_matrix: Sequence[Sequence[float]]) -> list[int]:
    """Build the initial visiting order as indices into ``stops``.

    Index 0 is the anchor and always comes first. Every ``high`` priority stop
    follows it in input order, regardless of distance, and the remaining stops
    are appended greedily by nearest neighbor from the last placed stop.
    """

    count = len(stops)
    if count == 0:
        return []

    visited = [False] * count
    visited[0] = True
    route = [0]

    for index in range(1, count):
        if stops[index].is_high_priority:
            visited[index] = True
            route.append(index)
    if len(route) > 1:
        logger.debug("Placed %d high priority stops after the anchor", len(route) - 1)

    current = route[-1]
    while len(route) < count:
        current = _nearest_unvisited(distance_matrix[current], visited)
        visited[current] = True
        route.append(current)

    return route

"""2-opt local search over a constructed tour."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


def two_opt(
    route: Sequence[int],
    distance_matrix: Sequence[Sequence[float]],
    max_passes: Optional[int] = None,
) -> list[int]:
    """Improve ``route`` by sub-path reversals until no reversal shortens it.

    The first element is the anchor and never moves, and the last element is
    only ever used as a boundary. A reversal of ``route[i..j]`` is applied when
    the two new boundary edges are strictly shorter than the two old ones, so
    the returned tour is never longer than the input. ``max_passes`` bounds the
    number of full sweeps; ``None`` iterates to a fixed point.
    """

    best = list(route)
    size = len(best)
    if size < 4:
        return best

    passes = 0
    improved = True
    while improved:
        if max_passes is not None and passes >= max_passes:
            logger.debug("2-opt stopped after reaching the %d pass limit", max_passes)
            break
        improved = False
        passes += 1
        for i in range(1, size - 2):
            for j in range(i + 1, size - 1):
                before, first, last, after = best[i - 1], best[i], best[j], best[j + 1]
                current = distance_matrix[before][first] + distance_matrix[last][after]
                candidate = distance_matrix[before][last] + distance_matrix[first][after]
                if candidate < current:
                    best[i : j + 1] = reversed(best[i : j + 1])
                    improved = True

    logger.debug("2-opt finished after %d passes", passes)
    return best

"""Tour construction heuristics feeding the local search stage."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from core.tour import Tour
from planner.local_search import DistanceOracle, location_distance, path_length

logger = logging.getLogger(__name__)


def nearest_neighbour_tour(locations: Sequence[Any],
                           start: int = 0,
                           distance: Optional[DistanceOracle] = None) -> Tour:
    """Greedy nearest-neighbour tour starting from ``locations[start]``.

    From the current location, always travel to the closest unvisited one.
    Ties go to the location listed first.  Runs in O(n^2) distance calls.

    Args:
        locations: every location to visit, each exactly once
        start: index into ``locations`` of the first stop
        distance: optional ``distance(a, b)`` oracle; defaults to
            ``a.distance_to(b)``

    Raises:
        ValueError: if ``start`` is not a valid index of a non-empty input
    """
    if distance is None:
        distance = location_distance

    n = len(locations)
    if n == 0:
        return Tour()
    if not 0 <= start < n:
        raise ValueError(f"Invalid start index {start} for {n} locations")

    visited = [False] * n
    order = [locations[start]]
    visited[start] = True
    current = locations[start]

    for _ in range(n - 1):
        best_idx = -1
        best_dist = 0.0
        for idx in range(n):
            if visited[idx]:
                continue
            d = distance(current, locations[idx])
            if best_idx == -1 or d < best_dist:
                best_idx = idx
                best_dist = d
        visited[best_idx] = True
        current = locations[best_idx]
        order.append(current)

    tour = Tour(order)
    logger.debug(f"[NN] Built tour over {n} locations, length={path_length(tour, distance)}")
    return tour

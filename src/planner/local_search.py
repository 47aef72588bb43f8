"""Local search heuristics that refine a constructed tour.

Two neighbourhoods are provided, both first-improvement and both driven to a
fixed point (a full sweep that changes nothing):

* ``two_opt`` removes two non-adjacent edges and reconnects the tour by
  reversing the segment between them.
* ``two_half_opt`` (Or-opt with single cities) relocates one city to a
  different position, which covers the A-B-C..D-E -> A-C..D-B-E and
  A-B..C-D-E -> A-D-B..C-E exchanges that no reversal can produce.

Both enumerate position pairs ``(i, j)`` with ``0 <= i`` and
``i + 3 <= j < n`` and mutate the tour in place.  Moves never remove the
closing edge between the last and first position.  Every optimiser returns
the cyclic length of the resulting tour.

Distances come either from ``location.distance_to(other)`` or from an
explicit ``distance(a, b)`` callable such as a
:class:`physics.distance.DistanceMatrix`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

from config import DEFAULT_LOCAL_SEARCH_PARAMS, LocalSearchParams
from core.city import Location
from core.tour import Tour

logger = logging.getLogger(__name__)

DistanceOracle = Callable[[Any, Any], float]


@dataclass
class SearchStats:
    """Bookkeeping for a single optimiser call."""

    passes: int = 0
    moves: int = 0
    hit_pass_limit: bool = False


@dataclass
class LocalSearchResult:
    """Outcome of :func:`optimize_tour` (2-opt followed by Or-opt)."""

    initial_length: float
    two_opt_length: float
    final_length: float
    two_opt_stats: SearchStats = field(default_factory=SearchStats)
    two_half_opt_stats: SearchStats = field(default_factory=SearchStats)

    @property
    def improvement_ratio(self) -> float:
        if self.initial_length <= 0:
            return 0.0
        return max(0.0, (self.initial_length - self.final_length) / self.initial_length)


def location_distance(a: Location, b: Location) -> float:
    """Default oracle: ask the location itself."""
    return a.distance_to(b)


def _resolve(distance: Optional[DistanceOracle],
             params: Optional[LocalSearchParams]) -> Tuple[DistanceOracle, LocalSearchParams]:
    if distance is None:
        distance = location_distance
    if params is None:
        params = DEFAULT_LOCAL_SEARCH_PARAMS
    return distance, params


def _improves(current: float, candidate: float, tolerance: float) -> bool:
    return candidate < current - tolerance


# ========== Path length ==========

def path_length(tour: Tour, distance: Optional[DistanceOracle] = None) -> float:
    """Cyclic tour length including the closing edge; 0 for fewer than 2 locations."""
    distance, _ = _resolve(distance, None)
    n = len(tour)
    if n < 2:
        return 0
    return sum(distance(tour[p], tour[(p + 1) % n]) for p in range(n))


# ========== 2-opt ==========

def _two_opt_costs(tour: Tour, i: int, j: int, distance: DistanceOracle) -> Tuple[float, float]:
    current = distance(tour[i], tour[i + 1]) + distance(tour[j - 1], tour[j])
    candidate = distance(tour[i], tour[j - 1]) + distance(tour[i + 1], tour[j])
    return current, candidate


def two_opt_delta(tour: Tour, i: int, j: int, distance: Optional[DistanceOracle] = None) -> float:
    """Length change of reversing positions [i+1, j-1]; negative means shorter.

    Replaces edges (i, i+1) and (j-1, j) with (i, j-1) and (i+1, j).
    Requires ``i + 3 <= j < len(tour)``.
    """
    distance, _ = _resolve(distance, None)
    current, candidate = _two_opt_costs(tour, i, j, distance)
    return candidate - current


def is_two_opt_optimal(tour: Tour,
                       distance: Optional[DistanceOracle] = None,
                       tolerance: Optional[float] = None) -> bool:
    """True when no pair (i, j) yields a 2-opt move beyond ``tolerance``."""
    distance, params = _resolve(distance, None)
    if tolerance is None:
        tolerance = params.improvement_tolerance
    n = len(tour)
    for i in range(n - 3):
        for j in range(i + 3, n):
            current, candidate = _two_opt_costs(tour, i, j, distance)
            if _improves(current, candidate, tolerance):
                return False
    return True


def _two_opt_pass(tour: Tour, distance: DistanceOracle, tolerance: float) -> int:
    moves = 0
    n = len(tour)
    for i in range(n - 3):
        for j in range(i + 3, n):
            current, candidate = _two_opt_costs(tour, i, j, distance)
            if _improves(current, candidate, tolerance):
                # Later pairs in this pass see the reversed order.
                tour.reverse_segment(i + 1, j)
                moves += 1
    return moves


# ========== Or-opt (2.5-opt) ==========

def _try_relocation(tour: Tour, distance: DistanceOracle, tolerance: float,
                    source: int, target: int, before: int, after: int) -> bool:
    """Move ``tour[source]`` between ``tour[before]`` and ``tour[after]`` if shorter.

    Removed edges: (source-1, source), (source, source+1), (before, after).
    Added edges:   (source-1, source+1), (before, source), (source, after).
    """
    prev_loc, loc, next_loc = tour[source - 1], tour[source], tour[source + 1]
    left, right = tour[before], tour[after]
    current = distance(prev_loc, loc) + distance(loc, next_loc) + distance(left, right)
    candidate = distance(prev_loc, next_loc) + distance(left, loc) + distance(loc, right)
    if not _improves(current, candidate, tolerance):
        return False
    tour.relocate(source, target)
    return True


def _two_half_opt_pass(tour: Tour, distance: DistanceOracle, tolerance: float) -> int:
    moves = 0
    n = len(tour)
    for i in range(n - 3):
        for j in range(i + 3, n):
            # A-B-C..D-E -> A-C..D-B-E: city at i+1 moves to just before j
            if _try_relocation(tour, distance, tolerance,
                               source=i + 1, target=j - 1, before=j - 1, after=j):
                moves += 1
            # A-B..C-D-E -> A-D-B..C-E: city at j-1 moves to just after i
            if _try_relocation(tour, distance, tolerance,
                               source=j - 1, target=i + 1, before=i, after=i + 1):
                moves += 1
    return moves


# ========== Fixed-point driver ==========

def _search(label: str,
            sweep: Callable[[Tour, DistanceOracle, float], int],
            tour: Tour,
            distance: DistanceOracle,
            params: LocalSearchParams) -> SearchStats:
    stats = SearchStats()
    while True:
        if params.max_passes is not None and stats.passes >= params.max_passes:
            stats.hit_pass_limit = True
            logger.warning(f"[{label}] Stopped after max_passes={params.max_passes} "
                           f"with the last pass still improving ({stats.moves} moves total)")
            break
        moves = sweep(tour, distance, params.improvement_tolerance)
        stats.passes += 1
        stats.moves += moves
        logger.debug(f"[{label}] Pass {stats.passes}: {moves} moves")
        if moves == 0:
            break
    return stats


def _run_two_opt(tour: Tour, distance: DistanceOracle, params: LocalSearchParams) -> SearchStats:
    stats = _search("2-OPT", _two_opt_pass, tour, distance, params)
    logger.info(f"[2-OPT] Finished on {len(tour)} locations: "
                f"{stats.moves} moves in {stats.passes} passes")
    return stats


def _run_two_half_opt(tour: Tour, distance: DistanceOracle, params: LocalSearchParams) -> SearchStats:
    stats = _search("OR-OPT", _two_half_opt_pass, tour, distance, params)
    logger.info(f"[OR-OPT] Finished on {len(tour)} locations: "
                f"{stats.moves} moves in {stats.passes} passes")
    return stats


def two_opt(tour: Tour,
            distance: Optional[DistanceOracle] = None,
            params: Optional[LocalSearchParams] = None) -> float:
    """Drive ``tour`` to a 2-opt local optimum in place and return its length.

    Given A-B..C-D, try A-C..B-D; whenever that is strictly shorter the
    segment B..C is reversed.  Tours with fewer than 4 locations are only
    evaluated.
    """
    distance, params = _resolve(distance, params)
    _run_two_opt(tour, distance, params)
    return path_length(tour, distance)


def two_half_opt(tour: Tour,
                 distance: Optional[DistanceOracle] = None,
                 params: Optional[LocalSearchParams] = None) -> float:
    """Drive ``tour`` to an Or-opt (single-city relocation) local optimum.

    Meant to run after :func:`two_opt` has converged.  Mutates ``tour`` in
    place and returns its length.
    """
    distance, params = _resolve(distance, params)
    _run_two_half_opt(tour, distance, params)
    return path_length(tour, distance)


def optimize_tour(tour: Tour,
                  distance: Optional[DistanceOracle] = None,
                  params: Optional[LocalSearchParams] = None) -> LocalSearchResult:
    """Run 2-opt then Or-opt on ``tour`` in place and report both stages."""
    distance, params = _resolve(distance, params)
    initial_length = path_length(tour, distance)
    two_opt_stats = _run_two_opt(tour, distance, params)
    two_opt_length = path_length(tour, distance)
    two_half_opt_stats = _run_two_half_opt(tour, distance, params)
    final_length = path_length(tour, distance)
    logger.info(f"[LOCAL SEARCH] {initial_length} -> {two_opt_length} (2-opt) "
                f"-> {final_length} (Or-opt)")
    return LocalSearchResult(
        initial_length=initial_length,
        two_opt_length=two_opt_length,
        final_length=final_length,
        two_opt_stats=two_opt_stats,
        two_half_opt_stats=two_half_opt_stats,
    )

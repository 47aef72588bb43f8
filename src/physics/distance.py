"""Distance helpers shared by the tour, construction, and local-search layers.

It provides Euclidean, rounded Euclidean, and Manhattan metrics plus a
precomputed ``DistanceMatrix`` that caches all pairwise distances and can be
handed directly to the optimisers as their distance oracle.
"""

from typing import Callable, Dict, List, Tuple
import math

import numpy as np

DistanceFunc = Callable[[float, float, float, float], float]


# Basic distance calculation functions
def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Straight-line distance between two points.

    Formula: d = sqrt((x2-x1)^2 + (y2-y1)^2)
    """
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def rounded_euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> int:
    """
    Euclidean distance rounded to the nearest integer (TSPLIB ``nint``).

    Integer distances make every accepted move shorten the tour by at least
    one unit, so the local searches terminate without a tolerance.
    """
    return int(math.floor(euclidean_distance(x1, y1, x2, y2) + 0.5))


def manhattan_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Grid distance between two points.

    Formula: d = |x2-x1| + |y2-y1|
    """
    return abs(x2 - x1) + abs(y2 - y1)


METRICS: Dict[str, DistanceFunc] = {
    "euclidean": euclidean_distance,
    "rounded": rounded_euclidean_distance,
    "manhattan": manhattan_distance,
}


def get_metric(name: str) -> DistanceFunc:
    """Look up a metric by its command-line name."""
    try:
        return METRICS[name]
    except KeyError:
        raise ValueError(f"Unknown metric '{name}', expected one of {sorted(METRICS)}") from None


# Distance Matrix class for precomputed distances
class DistanceMatrix:
    """
    Precomputed pairwise distances between city ids.

    Lookups are O(1) array reads; instances are callable so they can be used
    as the ``distance(a, b)`` oracle of the local searches when a tour holds
    bare city ids.
    """

    def __init__(self,
                 coordinates: Dict[int, Tuple[float, float]],
                 distance_func: DistanceFunc = euclidean_distance):
        """
        Args:
            coordinates: city id -> (x, y)
            distance_func: metric applied to every ordered pair

        Example:
            dm = DistanceMatrix({0: (0, 0), 1: (3, 4)})
            dm.get_distance(0, 1)  # 5.0
        """
        self.coordinates = coordinates
        self.distance_func = distance_func

        self._index: Dict[int, int] = {node_id: idx for idx, node_id in enumerate(coordinates)}
        self._matrix = np.zeros((len(coordinates), len(coordinates)), dtype=float)
        self._build_matrix()

    def _build_matrix(self):
        node_ids = list(self.coordinates.keys())
        for a, i in enumerate(node_ids):
            x1, y1 = self.coordinates[i]
            for b in range(a + 1, len(node_ids)):
                x2, y2 = self.coordinates[node_ids[b]]
                distance = self.distance_func(x1, y1, x2, y2)
                self._matrix[a, b] = distance
                self._matrix[b, a] = distance

    @property
    def node_ids(self) -> List[int]:
        return list(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __call__(self, node_i: int, node_j: int) -> float:
        return self.get_distance(node_i, node_j)

    def get_distance(self, node_i: int, node_j: int) -> float:
        """Distance between two city ids (O(1) lookup)."""
        return float(self._matrix[self._index[node_i], self._index[node_j]])


def create_distance_matrix(coordinates: Dict[int, Tuple[float, float]],
                           metric: str = "euclidean") -> DistanceMatrix:
    """Build a ``DistanceMatrix`` using a metric selected by name."""
    return DistanceMatrix(coordinates, distance_func=get_metric(metric))

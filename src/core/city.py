"""
City data structure module
==========================
Defines the location type the tour optimisers operate on.

The optimisers only ever call ``distance_to`` on a location, so any object
satisfying :class:`Location` can be placed in a tour.  ``City`` is the
concrete coordinate-based implementation used by the I/O layer, the instance
generator, and the command-line driver.
"""

from typing import Dict, Iterable, List, Protocol, Tuple
from dataclasses import dataclass, field

from physics.distance import DistanceFunc, euclidean_distance


class Location(Protocol):
    """Anything that can report a symmetric, non-negative distance to a peer."""

    def distance_to(self, other) -> float:
        ...


@dataclass(frozen=True)
class City:
    """
    A city with an id and planar coordinates.

    Immutable: identity and position never change once created; only a
    tour's ordering of cities does.

    Attributes:
        city_id: non-negative identifier, unique within an instance
        coordinates: (x, y)
        metric: distance function applied by ``distance_to``; excluded from
            equality and hashing
    """
    city_id: int
    coordinates: Tuple[float, float]
    metric: DistanceFunc = field(default=euclidean_distance, compare=False, repr=False)

    def __post_init__(self):
        if self.city_id < 0:
            raise ValueError(f"City id must be non-negative: {self.city_id}")

    @property
    def x(self) -> float:
        return self.coordinates[0]

    @property
    def y(self) -> float:
        return self.coordinates[1]

    def distance_to(self, other: "City") -> float:
        return self.metric(self.x, self.y, other.x, other.y)

    def __str__(self) -> str:
        return f"City{self.city_id}"


# ========== Convenience constructors ==========

def create_city(city_id: int, x: float, y: float,
                metric: DistanceFunc = euclidean_distance) -> City:
    return City(city_id=city_id, coordinates=(float(x), float(y)), metric=metric)


def cities_from_coordinates(coordinates: Iterable[Tuple[float, float]],
                            metric: DistanceFunc = euclidean_distance) -> List[City]:
    """Number a sequence of (x, y) points 0..n-1 and wrap them as cities."""
    return [create_city(idx, x, y, metric) for idx, (x, y) in enumerate(coordinates)]


def coordinates_by_id(cities: Iterable[City]) -> Dict[int, Tuple[float, float]]:
    """Map city id -> coordinates, the input format of ``DistanceMatrix``."""
    return {city.city_id: city.coordinates for city in cities}

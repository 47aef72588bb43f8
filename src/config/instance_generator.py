"""Random and structured TSP instance generation.

Provides reproducible random layouts (seeded through numpy's ``Generator``),
convex polygon layouts whose angular order is already optimal, a handful of
named presets, and readable instance descriptions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from config.defaults import DEFAULT_INSTANCE
from core.city import City, create_city
from physics.distance import DistanceFunc, euclidean_distance


# ── Config ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class InstanceConfig:
    """Immutable specification of a uniformly random instance."""

    num_cities: int = 20
    width: float = DEFAULT_INSTANCE.width
    height: float = DEFAULT_INSTANCE.height
    integer_coordinates: bool = DEFAULT_INSTANCE.integer_coordinates
    seed: int = DEFAULT_INSTANCE.seed


SMALL_10 = InstanceConfig(num_cities=10, width=100.0, height=100.0, seed=7)
MEDIUM_50 = InstanceConfig(num_cities=50, seed=42)
LARGE_200 = InstanceConfig(num_cities=200, width=5000.0, height=5000.0, seed=2024)

INSTANCE_PRESETS: Dict[str, InstanceConfig] = {
    "small": SMALL_10,
    "medium": MEDIUM_50,
    "large": LARGE_200,
}


# ── Generators ─────────────────────────────────────────────────────────


def generate_coordinates(config: InstanceConfig) -> List[Tuple[float, float]]:
    """Draw ``num_cities`` points in ``[0, width] x [0, height]``."""
    if config.num_cities < 0:
        raise ValueError(f"num_cities must be non-negative, got {config.num_cities}")

    rng = np.random.default_rng(config.seed)
    xs = rng.uniform(0.0, config.width, size=config.num_cities)
    ys = rng.uniform(0.0, config.height, size=config.num_cities)
    if config.integer_coordinates:
        xs = np.rint(xs)
        ys = np.rint(ys)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def generate_cities(config: InstanceConfig,
                    metric: DistanceFunc = euclidean_distance) -> List[City]:
    """Cities with ids 0..n-1 placed uniformly at random (same seed, same cities)."""
    return [
        create_city(city_id, x, y, metric)
        for city_id, (x, y) in enumerate(generate_coordinates(config))
    ]


def generate_convex_polygon(num_cities: int,
                            radius: float = DEFAULT_INSTANCE.polygon_radius,
                            center: Tuple[float, float] = DEFAULT_INSTANCE.polygon_center,
                            metric: DistanceFunc = euclidean_distance) -> List[City]:
    """Cities evenly spaced on a circle, listed in counter-clockwise order.

    That order traces the convex hull, which is the optimal tour.
    """
    if num_cities < 0:
        raise ValueError(f"num_cities must be non-negative, got {num_cities}")

    cx, cy = center
    cities = []
    for k in range(num_cities):
        angle = 2.0 * math.pi * k / num_cities
        cities.append(create_city(k, cx + radius * math.cos(angle), cy + radius * math.sin(angle), metric))
    return cities


def describe_instance(config: InstanceConfig) -> str:
    """One-line human-readable summary of a config."""
    kind = "integer" if config.integer_coordinates else "real"
    return (f"{config.num_cities} cities, {kind} coordinates in "
            f"{config.width:g} x {config.height:g}, seed={config.seed}")

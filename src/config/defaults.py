"""Central repository for tunable local-search and instance defaults.

Numerical values that influence how the tour optimisers accept moves and
when they stop are collected here so they can be updated from a single
location without touching algorithmic code.  The constants are exposed as
frozen dataclasses to keep them structured and easily serialisable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class LocalSearchParams:
    """Acceptance and termination settings shared by 2-opt and Or-opt.

    A move is accepted only when it shortens the tour by more than
    ``improvement_tolerance``.  Any tolerance below 1 leaves integer-distance
    instances untouched while absorbing floating point noise on continuous
    ones.  ``max_passes`` optionally caps the number of full neighbourhood
    sweeps per optimiser call; ``None`` runs until a pass makes no change.
    """

    improvement_tolerance: float = 1e-9
    max_passes: Optional[int] = None

    def __post_init__(self) -> None:
        if self.improvement_tolerance < 0:
            raise ValueError(
                f"improvement_tolerance must be non-negative, got {self.improvement_tolerance}"
            )
        if self.max_passes is not None and self.max_passes < 1:
            raise ValueError(f"max_passes must be at least 1, got {self.max_passes}")


@dataclass(frozen=True)
class InstanceDefaults:
    """Baseline area and seeding used by the random instance generator."""

    width: float = 1000.0
    height: float = 1000.0
    seed: int = 42
    integer_coordinates: bool = True
    polygon_radius: float = 100.0
    polygon_center: Tuple[float, float] = (0.0, 0.0)


DEFAULT_LOCAL_SEARCH_PARAMS = LocalSearchParams()
DEFAULT_INSTANCE = InstanceDefaults()

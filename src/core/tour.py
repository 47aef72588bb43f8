"""
Tour data structure module
==========================
Defines the cyclic visiting order that the local searches rearrange.

Design notes:
    - Tour = owned list of locations, implicitly closed (last -> first)
    - Only positions change; no location is ever created, copied or dropped
    - Segment operations (reverse, relocate) are bounds-checked so the
      optimisers never do raw index arithmetic on the list itself

Move mapping:
    2-opt       -> reverse_segment(i + 1, j)      positions [i+1, j-1] reversed
    Or-opt fwd  -> relocate(i + 1, j - 1)         [i+2, j-1] shift one slot left
    Or-opt bwd  -> relocate(j - 1, i + 1)         [i+1, j-2] shift one slot right
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Tuple


@dataclass
class Tour:
    """
    Mutable, indexable, cyclic sequence of locations.

    Attributes:
        locations: visiting order; position n-1 is adjacent to position 0
    """

    locations: List[Any] = field(default_factory=list)

    def __post_init__(self):
        # Own the storage; never alias the caller's list.
        self.locations = list(self.locations)

    # ========== Sequence protocol ==========

    def __len__(self) -> int:
        return len(self.locations)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.locations)

    def __getitem__(self, position: int) -> Any:
        """Location at ``position``; negative positions are rejected, not wrapped."""
        self._check_position(position)
        return self.locations[position]

    def __setitem__(self, position: int, location: Any) -> None:
        self._check_position(position)
        self.locations[position] = location

    def __str__(self) -> str:
        return " -> ".join(str(location) for location in self.locations)

    # ========== Queries ==========

    def is_empty(self) -> bool:
        return len(self.locations) == 0

    def edge(self, position: int) -> Tuple[Any, Any]:
        """
        The edge leaving ``position``: (tour[p], tour[(p + 1) mod n]).

        For the last position this is the closing edge back to the start.
        """
        n = len(self.locations)
        self._check_position(position)
        return self.locations[position], self.locations[(position + 1) % n]

    def edges(self) -> Iterator[Tuple[Any, Any]]:
        for position in range(len(self.locations)):
            yield self.edge(position)

    def is_permutation_of(self, other: Iterable[Any]) -> bool:
        """True when both hold exactly the same multiset of locations."""
        return Counter(self.locations) == Counter(other)

    # ========== Segment operations ==========

    def reverse_segment(self, start: int, stop: int) -> None:
        """
        Reverse positions [start, stop) in place.

        Raises:
            IndexError: unless 0 <= start <= stop <= len(tour)
        """
        if not 0 <= start <= stop <= len(self.locations):
            raise IndexError(f"Invalid segment [{start}, {stop}) for tour of size {len(self.locations)}")
        self.locations[start:stop] = self.locations[start:stop][::-1]

    def relocate(self, source: int, target: int) -> None:
        """
        Move the location at ``source`` so it ends up at ``target``.

        Everything in between shifts by one slot to close the gap: left when
        moving forward (source < target), right when moving backward.  The
        relative order of every other location is preserved.

        Raises:
            IndexError: if either position is outside the tour
        """
        self._check_position(source)
        self._check_position(target)
        location = self.locations.pop(source)
        self.locations.insert(target, location)

    def copy(self) -> "Tour":
        """Shallow copy: new ordering list, same location objects."""
        return Tour(self.locations)

    def _check_position(self, position: int) -> None:
        if position < 0 or position >= len(self.locations):
            raise IndexError(f"Invalid position: {position} (tour size {len(self.locations)})")

"""Plain-text IO helpers for city instances and finished tours.

Instance files hold one city per line as ``id x y`` (whitespace separated);
blank lines and ``#`` comments are ignored.  Tour files hold the tour length
on the first line followed by one city id per line in visiting order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from core.city import City, create_city
from core.tour import Tour
from physics.distance import DistanceFunc, euclidean_distance


def parse_cities(lines: Iterable[str],
                 metric: DistanceFunc = euclidean_distance) -> List[City]:
    """Parse ``id x y`` lines into cities, preserving file order.

    Raises:
        ValueError: on a malformed line or a repeated city id
    """
    cities: List[City] = []
    seen = set()
    for line_no, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != 3:
            raise ValueError(f"Line {line_no}: expected 'id x y', got {raw.strip()!r}")
        try:
            city_id = int(parts[0])
            x, y = float(parts[1]), float(parts[2])
        except ValueError:
            raise ValueError(f"Line {line_no}: non-numeric field in {raw.strip()!r}") from None
        if city_id in seen:
            raise ValueError(f"Line {line_no}: duplicate city id {city_id}")
        seen.add(city_id)
        cities.append(create_city(city_id, x, y, metric))
    return cities


def load_cities(path: str | Path, metric: DistanceFunc = euclidean_distance) -> List[City]:
    return parse_cities(Path(path).read_text(encoding="utf-8").splitlines(), metric)


def format_tour_length(length: float) -> str:
    """Integral lengths print without a decimal point."""
    if float(length).is_integer():
        return str(int(length))
    return f"{length:.6f}"


def tour_ids(tour: Tour) -> List[int]:
    """City ids in visiting order; bare ids are passed through."""
    return [getattr(location, "city_id", location) for location in tour]


def save_tour(path: str | Path, length: float, tour: Tour) -> None:
    lines = [format_tour_length(length)] + [str(city_id) for city_id in tour_ids(tour)]
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")


def load_tour_ids(path: str | Path) -> List[int]:
    """Read back the ids written by :func:`save_tour` (the length line is skipped)."""
    lines = [line.strip() for line in Path(path).read_text(encoding="utf-8").splitlines()]
    return [int(line) for line in lines[1:] if line]

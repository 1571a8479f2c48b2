"""Chronal coordinates: Manhattan-distance areas on a bounded grid."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from itertools import product


@dataclass(frozen=True)
class _Point:
    x: int
    y: int

    def manhattan_distance(self, other: _Point) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass(frozen=True)
class _Grid:
    coordinates: list[_Point]
    min: _Point
    max: _Point

    def cells(self):
        for x, y in product(range(self.min.x, self.max.x + 1), range(self.min.y, self.max.y + 1)):
            yield _Point(x, y)

    def on_boundary(self, p: _Point) -> bool:
        return p.x in (self.min.x, self.max.x) or p.y in (self.min.y, self.max.y)


def _parse(text: str) -> _Grid:
    points = []
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            raw_x, raw_y = line.split(",")
            points.append(_Point(int(raw_x), int(raw_y)))
        except ValueError as exc:
            raise ValueError(f"malformed coordinate: {line!r}") from exc
    if not points:
        raise ValueError("no coordinates given")
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return _Grid(points, _Point(min(xs), min(ys)), _Point(max(xs), max(ys)))


def _closest(cell: _Point, coordinates: list[_Point]) -> _Point | None:
    """The single nearest coordinate, or None when two or more tie."""
    distances = [(cell.manhattan_distance(c), c) for c in coordinates]
    best = min(d for d, _ in distances)
    nearest = [c for d, c in distances if d == best]
    return nearest[0] if len(nearest) == 1 else None


def find_largest_finite_area(text: str) -> int:
    """Size of the largest area closest to one coordinate that does not reach the edge."""
    grid = _parse(text)
    areas: dict[_Point, list[_Point]] = defaultdict(list)
    for cell in grid.cells():
        nearest = _closest(cell, grid.coordinates)
        if nearest is not None:
            areas[nearest].append(cell)

    finite_sizes = [
        len(areas[c])
        for c in grid.coordinates
        if not any(grid.on_boundary(cell) for cell in areas[c])
    ]
    if not finite_sizes:
        raise ValueError("every area is infinite")
    return max(finite_sizes)


def find_region_area_minimized_by_constraint(text: str, constraint: int) -> int:
    """Number of cells whose total distance to all coordinates is below ``constraint``."""
    grid = _parse(text)
    return sum(
        1
        for cell in grid.cells()
        if sum(cell.manhattan_distance(c) for c in grid.coordinates) < constraint
    )
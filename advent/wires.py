"""Crossed wires: intersections of two paths laid out on a grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def manhattan_distance(self, other: Point) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


ORIGIN = Point()

_DIRECTIONS = {"U": (0, 1), "R": (1, 0), "D": (0, -1), "L": (-1, 0)}


def _derive_path(raw_path: str) -> dict[Point, int]:
    """Map every point a wire visits to the steps first taken to reach it."""
    steps_to: dict[Point, int] = {}
    x = y = 0
    count = 0
    for movement in raw_path.strip().split(","):
        try:
            dx, dy = _DIRECTIONS[movement[0]]
            magnitude = int(movement[1:])
        except (IndexError, KeyError, ValueError):
            raise ValueError(f"malformed movement: {movement!r}") from None
        for _ in range(magnitude):
            steps_to.setdefault(Point(x, y), count)
            x += dx
            y += dy
            count += 1
    return steps_to


def _paths(text: str) -> tuple[dict[Point, int], dict[Point, int]]:
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("two wire paths are required")
    return _derive_path(lines[0]), _derive_path(lines[1])


def _intersections(first: dict[Point, int], second: dict[Point, int]) -> set[Point]:
    crossings = (first.keys() & second.keys()) - {ORIGIN}
    if not crossings:
        raise ValueError("the wires never cross")
    return crossings


def find_nearest_intersection(text: str) -> Point:
    """The crossing closest to the origin by Manhattan distance."""
    first, second = _paths(text)
    return min(_intersections(first, second), key=ORIGIN.manhattan_distance)


def find_minimal_total_steps(text: str) -> int:
    """The fewest combined steps both wires take to reach a common crossing."""
    first, second = _paths(text)
    return min(first[p] + second[p] for p in _intersections(first, second))
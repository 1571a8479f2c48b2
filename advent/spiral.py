"""Spiral memory: coordinates of numbered cells and neighbour-sum values."""

from __future__ import annotations

from dataclasses import dataclass

_LEFT = (-1, 0)
_UP = (0, 1)
_RIGHT = (1, 0)
_DOWN = (0, -1)


@dataclass(frozen=True)
class Point:
    """A cell on the spiral grid, with the origin at cell 1."""

    x: int
    y: int

    def manhattan_distance_from_origin(self) -> int:
        return abs(self.x) + abs(self.y)

    def moved(self, delta: tuple[int, int]) -> Point:
        return Point(self.x + delta[0], self.y + delta[1])

    def neighbors(self) -> list[Point]:
        return [
            Point(self.x + dx, self.y + dy)
            for dx, dy in (
                (1, 0), (1, 1), (0, 1), (-1, 1),
                (-1, 0), (-1, -1), (0, -1), (1, -1),
            )
        ]


def to_cartesian_coordinate(cell_number: int) -> Point:
    """Locate a numbered cell by walking back from the corner of its ring."""
    side = 1
    breadth = 0
    while side * side < cell_number:
        side += 2
        breadth += 1

    point = Point(breadth, -breadth) if breadth > 0 else Point(0, 0)
    current = side * side

    for delta, count in (
        (_LEFT, side - 1),
        (_UP, side - 1),
        (_RIGHT, side - 1),
        (_DOWN, side - 2),
    ):
        for _ in range(count):
            if current == cell_number:
                break
            point = point.moved(delta)
            current -= 1

    return point


def manhattan_distance_to(cell_number: int) -> int:
    """Steps from a numbered cell to the centre of the spiral."""
    return to_cartesian_coordinate(cell_number).manhattan_distance_from_origin()


def first_cell_larger_than(target: int) -> int:
    """First value written in the neighbour-sum spiral that exceeds ``target``."""
    values = {Point(0, 0): 1, Point(1, 0): 1}
    location = Point(1, 0)
    value = values[location]
    side = 3

    while value <= target:
        for delta, count in (
            (_UP, side - 2),
            (_LEFT, side - 1),
            (_DOWN, side - 1),
            (_RIGHT, side),
        ):
            for _ in range(count):
                if value > target:
                    break
                location = location.moved(delta)
                value = sum(values.get(n, 0) for n in location.neighbors())
                values[location] = value
        if value <= target:
            side += 2

    return value
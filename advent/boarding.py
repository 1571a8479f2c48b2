"""Boarding passes encoded by binary space partitioning."""

from __future__ import annotations

ROWS = 128
COLUMNS = 8


def _partition(locator: str, lower: str, size: int) -> tuple[int, int]:
    """Halve ``range(size)`` once per character, keeping the lower half on ``lower``."""
    low, high = 0, size - 1
    for char in locator:
        midpoint = (low + high) // 2
        if char == lower:
            high = midpoint
        else:
            low = midpoint + 1
    return low, high


def find_seat_location(boarding_pass: str) -> tuple[int, int]:
    """Row and column of the seat a boarding pass such as ``FBFBBFFRLR`` names."""
    if len(boarding_pass) < 7:
        raise ValueError(f"boarding pass too short: {boarding_pass!r}")
    _, row = _partition(boarding_pass[:7], "F", ROWS)
    column, _ = _partition(boarding_pass[7:], "L", COLUMNS)
    return row, column


def _seat_ids(text: str) -> list[int]:
    ids = []
    for line in text.splitlines():
        if not line.strip():
            continue
        row, column = find_seat_location(line.strip())
        ids.append(row * COLUMNS + column)
    return ids


def find_max_seat_id(text: str) -> int:
    """Highest seat id among the passes, or 0 if there are none."""
    return max(_seat_ids(text), default=0)


def find_missing_seat_id(text: str) -> int:
    """First id missing from the run of sorted seat ids, or 0 if there is no gap."""
    ids = sorted(_seat_ids(text))
    return next((a + 1 for a, b in zip(ids, ids[1:]) if b != a + 1), 0)
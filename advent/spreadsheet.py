"""Spreadsheet checksum built from evenly divisible values in each row."""

from __future__ import annotations


def _divisor_and_dividend(numbers: list[int]) -> tuple[int, int]:
    """Return the first (divisor, dividend) pair where the dividend divides evenly.

    When no such pair exists the last value is paired with itself.
    """
    if not numbers:
        raise ValueError("row holds no numbers")
    for i, divisor in enumerate(numbers):
        for j, dividend in enumerate(numbers):
            if i != j and dividend % divisor == 0:
                return divisor, dividend
    return numbers[-1], numbers[-1]


def checksum(spreadsheet: str) -> int:
    """Sum the quotients of the evenly divisible pair found on every row."""
    total = 0
    for row in spreadsheet.splitlines():
        numbers = [int(field) for field in row.split()]
        divisor, dividend = _divisor_and_dividend(numbers)
        total += dividend // divisor
    return total
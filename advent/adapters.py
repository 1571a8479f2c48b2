"""Joltage adapter chains: step differences and the number of valid arrangements."""

from __future__ import annotations

from collections import Counter


def _jolt_ratings(text: str) -> list[int]:
    return sorted(int(line) for line in text.splitlines() if line.strip())


def find_jolt_differences(text: str) -> dict[int, int]:
    """Count the joltage steps when every adapter is chained from the outlet.

    The device's built-in adapter always adds one difference of 3.
    """
    counts: Counter[int] = Counter({3: 1})
    previous = 0
    for jolt in _jolt_ratings(text):
        difference = jolt - previous
        if not 1 <= difference <= 3:
            raise ValueError(f"no adapter can follow {previous} jolts")
        counts[difference] += 1
        previous = jolt
    return dict(counts)


def count_distinct_possible_arrangements(text: str) -> int:
    """Number of distinct adapter chains from the outlet to the highest adapter."""
    jolts = _jolt_ratings(text)
    if not jolts:
        raise ValueError("no adapters given")

    descending = sorted(set(jolts), reverse=True)
    ways = {descending[0]: 1}
    for jolt in descending[1:]:
        ways[jolt] = sum(ways.get(jolt + step, 0) for step in (1, 2, 3))

    return sum(ways.get(step, 0) for step in (1, 2, 3))
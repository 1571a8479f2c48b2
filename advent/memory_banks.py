"""Memory bank reallocation and cycle detection."""

from __future__ import annotations


def serialize(memory: list[int]) -> str:
    """A hashable key for a bank configuration, e.g. ``0-2-7-0``."""
    return "-".join(str(blocks) for blocks in memory)


def redistribute(memory: list[int]) -> None:
    """Spread the fullest bank's blocks one at a time over the following banks, in place."""
    if not memory:
        raise ValueError("no memory banks")
    blocks = max(memory)
    start = memory.index(blocks)
    memory[start] = 0
    for step in range(1, blocks + 1):
        memory[(start + step) % len(memory)] += 1


def num_unique_distributions(memory: list[int]) -> tuple[int, int]:
    """Return the number of redistributions until a repeat, and the loop length."""
    banks = list(memory)
    seen: dict[str, int] = {}
    redistributions = 0
    while True:
        redistribute(banks)
        redistributions += 1
        key = serialize(banks)
        if key in seen:
            return redistributions, redistributions - seen[key]
        seen[key] = redistributions
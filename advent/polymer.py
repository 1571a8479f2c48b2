"""Polymer reactions: adjacent units of the same type and opposite polarity annihilate."""

from __future__ import annotations

from string import ascii_lowercase


def _reactive(a: str, b: str) -> bool:
    return a != b and a.lower() == b.lower()


def reduce_polymer(polymer: str) -> str:
    """Return the polymer left once no more reactions can happen."""
    remaining: list[str] = []
    for unit in polymer:
        if remaining and _reactive(remaining[-1], unit):
            remaining.pop()
        else:
            remaining.append(unit)
    return "".join(remaining)


def optimal_reduction(polymer: str) -> str:
    """Shortest reduced polymer after removing every unit of a single type.

    Ties go to the type that comes first in the alphabet.
    """
    reductions = (
        reduce_polymer(polymer.replace(unit, "").replace(unit.upper(), ""))
        for unit in ascii_lowercase
    )
    return min(reductions, key=len)
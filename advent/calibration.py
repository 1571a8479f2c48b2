"""Frequency calibration from a list of signed changes."""

from __future__ import annotations

from itertools import accumulate, cycle


def _changes(text: str) -> list[int]:
    return [int(line) for line in text.splitlines() if line.strip()]


def calibrate(text: str) -> int:
    """Apply every change, one per line, to a frequency starting at zero."""
    return sum(_changes(text))


def calibrate_duplication(text: str) -> int:
    """First frequency reached twice while applying the changes over and over."""
    changes = _changes(text)
    if not changes:
        raise ValueError("no frequency changes given")
    seen = {0}
    for frequency in accumulate(cycle(changes)):
        if frequency in seen:
            return frequency
        seen.add(frequency)
    raise AssertionError("unreachable")
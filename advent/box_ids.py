"""Box identifier checksums and the pair of ids that differ by one character."""

from __future__ import annotations

from collections import Counter


def checksum(text: str) -> int:
    """Ids with a letter exactly twice, times ids with a letter exactly three times."""
    doubles = triples = 0
    for box_id in text.splitlines():
        counts = set(Counter(box_id).values())
        doubles += 2 in counts
        triples += 3 in counts
    return doubles * triples


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character edits turning ``a`` into ``b``."""
    if a == b:
        return 0
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j - 1] + (char_a != char_b),
                    previous[j] + 1,
                    current[j - 1] + 1,
                )
            )
        previous = current
    return previous[-1]


def _find_pair(values: list[str], distance: int) -> tuple[str, str] | None:
    for a in values:
        for b in values:
            if levenshtein_distance(a, b) == distance:
                return a, b
    return None


def common_box_ids(text: str) -> str:
    """Letters shared by the two ids one edit apart, or an empty string if none are."""
    pair = _find_pair(text.splitlines(), 1)
    if pair is None:
        return ""
    a, b = pair
    mismatch = next(
        (i for i, (x, y) in enumerate(zip(a, b)) if x != y),
        min(len(a), len(b)),
    )
    return a[:mismatch] + a[mismatch + 1:]
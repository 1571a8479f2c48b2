"""Fabric claims: overlapping area and the one claim that overlaps nothing."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field

_CLAIM = re.compile(r"^#(\d+)\s+@\s+(\d+),(\d+):\s+(\d+)x(\d+)$")


@dataclass(frozen=True)
class Point:
    row: int
    col: int


@dataclass(frozen=True)
class Claim:
    """A rectangle of fabric whose top-left corner is ``location``."""

    id: int
    location: Point
    width: int
    height: int

    @property
    def points(self) -> Iterator[Point]:
        for row in range(self.height):
            for col in range(self.width):
                yield Point(self.location.row + row, self.location.col + col)


@dataclass
class Claimset:
    claims: list[Claim] = field(default_factory=list)

    def _common_points(self) -> set[Point]:
        counts = Counter(p for claim in self.claims for p in claim.points)
        return {point for point, count in counts.items() if count > 1}

    def overlapping_region(self) -> int:
        """Number of squares covered by two or more claims."""
        return len(self._common_points())

    def find_non_overlapping_claim(self) -> int | None:
        """Id of the first claim that shares no square, or None if every claim overlaps."""
        common = self._common_points()
        for claim in self.claims:
            if common.isdisjoint(claim.points):
                return claim.id
        return None


def parse_claim(raw_claim: str) -> Claim:
    """Parse a claim such as ``#1 @ 1,3: 4x4`` (left offset, top offset, size)."""
    match = _CLAIM.match(raw_claim.strip())
    if match is None:
        raise ValueError(f"malformed claim: {raw_claim!r}")
    claim_id, col, row, width, height = map(int, match.groups())
    return Claim(id=claim_id, location=Point(row, col), width=width, height=height)


def claimset_from_text(text: str) -> Claimset:
    return Claimset([parse_claim(line) for line in text.splitlines() if line.strip()])
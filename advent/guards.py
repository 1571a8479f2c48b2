"""Guard sleep logs: who sleeps most, and in which minute."""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_ENTRY = re.compile(r"^\[(.+)\] (.*)$")


@dataclass(frozen=True)
class Entry:
    timestamp: datetime
    content: str


@dataclass(frozen=True)
class Nap:
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


def _parse_entry(raw_entry: str) -> Entry:
    match = _ENTRY.match(raw_entry)
    if match is None:
        raise ValueError(f"malformed log entry: {raw_entry!r}")
    timestamp = datetime.strptime(match.group(1), "%Y-%m-%d %H:%M").replace(tzinfo=timezone.utc)
    return Entry(timestamp, match.group(2))


def parse_event_log(text: str) -> list[Entry]:
    """Parse log lines and return them in chronological order."""
    entries = [_parse_entry(line) for line in text.splitlines() if line.strip()]
    return sorted(entries, key=lambda entry: entry.timestamp)


def _naps_by_guard(entries: list[Entry]) -> dict[int, list[Nap]]:
    naps: dict[int, list[Nap]] = defaultdict(list)
    guard = 0
    nap_start: datetime | None = None
    for entry in entries:
        content = entry.content
        if content.endswith("begins shift"):
            guard = int(content.removeprefix("Guard #").removesuffix(" begins shift"))
        elif content.endswith("falls asleep"):
            nap_start = entry.timestamp
        elif content.endswith("wakes up"):
            if nap_start is None:
                raise ValueError(f"guard woke at {entry.timestamp} without falling asleep")
            naps[guard].append(Nap(nap_start, entry.timestamp))
    return naps


def find_sleepiest_guard(entries: list[Entry]) -> tuple[int, list[Nap]]:
    """The guard with the most total sleep, and that guard's naps."""
    best_guard = 0
    best_total = timedelta()
    naps = _naps_by_guard(entries)
    for guard, guard_naps in naps.items():
        total = sum((nap.duration for nap in guard_naps), timedelta())
        if total > best_total:
            best_guard, best_total = guard, total
    return best_guard, naps.get(best_guard, [])


def find_sleepiest_minute(naps: list[Nap]) -> tuple[int, int]:
    """The minute most often slept through, and how many naps covered it."""
    minutes = [0] * 60
    for nap in naps:
        for minute in range(nap.start.minute, nap.end.minute):
            minutes[minute] += 1
    most = max(minutes)
    return minutes.index(most), most


def find_sleepiest_guard_minute(entries: list[Entry]) -> tuple[int, int]:
    """The guard most frequently asleep on one same minute, and that minute."""
    best_guard = best_minute = 0
    best_count = -1
    for guard, naps in _naps_by_guard(entries).items():
        minute, count = find_sleepiest_minute(naps)
        if count > best_count:
            best_guard, best_minute, best_count = guard, minute, count
    return best_guard, best_minute
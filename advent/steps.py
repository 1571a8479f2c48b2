"""Step ordering from prerequisite instructions, alone and with a crew of workers."""

from __future__ import annotations

import heapq
import re
from collections import defaultdict

_STEP = re.compile(r"^Step ([A-Z]) must be finished before step ([A-Z]) can begin\.$")


def _parse(text: str) -> dict[str, set[str]]:
    """Map every step to the set of steps that must finish before it."""
    prerequisites: dict[str, set[str]] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _STEP.match(line)
        if match is None:
            raise ValueError(f"malformed step instruction: {line!r}")
        before, after = match.groups()
        prerequisites.setdefault(before, set())
        prerequisites.setdefault(after, set()).add(before)
    if not prerequisites:
        raise ValueError("no steps given")
    return prerequisites


class _Schedule:
    """Tracks which steps are ready as their prerequisites complete."""

    def __init__(self, prerequisites: dict[str, set[str]]) -> None:
        self.total = len(prerequisites)
        self._waiting = {step: len(before) for step, before in prerequisites.items()}
        self._dependents: dict[str, list[str]] = defaultdict(list)
        for step, before in prerequisites.items():
            for prerequisite in before:
                self._dependents[prerequisite].append(step)
        self.ready = [step for step, count in self._waiting.items() if count == 0]
        heapq.heapify(self.ready)

    def next_ready(self) -> str:
        return heapq.heappop(self.ready)

    def complete(self, step: str) -> None:
        for dependent in self._dependents[step]:
            self._waiting[dependent] -= 1
            if self._waiting[dependent] == 0:
                heapq.heappush(self.ready, dependent)


def determine_step_order(text: str) -> str:
    """Order in which the steps complete, taking the alphabetically first ready step each time."""
    schedule = _Schedule(_parse(text))
    order = []
    while schedule.ready:
        step = schedule.next_ready()
        order.append(step)
        schedule.complete(step)
    if len(order) != schedule.total:
        raise ValueError("the step instructions contain a cycle")
    return "".join(order)


def _duration(step: str, overhead: int) -> int:
    return overhead + ord(step) - ord("A") + 1


def determine_instruction_sla(text: str, num_helpers: int, step_completion_overhead: int) -> int:
    """Time for ``num_helpers`` helpers plus one worker to finish every step.

    A step takes ``step_completion_overhead`` plus its position in the alphabet.
    """
    workers = num_helpers + 1
    if workers < 1:
        raise ValueError("at least one worker is needed")

    schedule = _Schedule(_parse(text))
    in_progress: list[tuple[int, str]] = []
    now = 0
    done = 0

    while done < schedule.total:
        while schedule.ready and len(in_progress) < workers:
            step = schedule.next_ready()
            heapq.heappush(in_progress, (now + _duration(step, step_completion_overhead), step))
        if not in_progress:
            raise ValueError("the step instructions contain a cycle")

        now, step = heapq.heappop(in_progress)
        finished = [step]
        while in_progress and in_progress[0][0] == now:
            finished.append(heapq.heappop(in_progress)[1])
        for step in finished:
            schedule.complete(step)
            done += 1

    return now
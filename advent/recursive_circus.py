"""Program towers: find the bottom program and correct the unbalanced weight."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Program:
    """One program in the tower, with the programs it holds up."""

    name: str
    weight: int
    parent: str = ""
    supporting: tuple[str, ...] = ()
    subroutines: list[Program] = field(default_factory=list)

    def total_weight(self) -> int:
        return self.weight + sum(sub.total_weight() for sub in self.subroutines)

    def traverse(self) -> Iterator[Program]:
        """Yield this program and everything above it, breadth first."""
        queue = deque([self])
        while queue:
            current = queue.popleft()
            yield current
            queue.extend(current.subroutines)

    def __str__(self) -> str:
        return f"{self.name} ({self.weight}) [Parent: {self.parent}]"


def parse_program_tower_data_point(data: str) -> Program:
    """Parse a line such as ``fwft (72) -> ktlj, cntj, xhth``."""
    head, arrow, tail = data.partition(" -> ")
    try:
        name, raw_weight = head.split(" ")
        weight = int(raw_weight.strip("()"))
    except ValueError as exc:
        raise ValueError(f"malformed program line: {data!r}") from exc
    supporting = tuple(tail.split(", ")) if arrow else ()
    return Program(name=name, weight=weight, supporting=supporting)


def find_root_of_call_tree(text: str) -> Program:
    """Build the tower from its description and return the bottom program."""
    programs = {}
    for line in text.splitlines():
        program = parse_program_tower_data_point(line)
        programs[program.name] = program

    parents = [p for p in programs.values() if p.supporting]
    for parent in parents:
        for child in parent.supporting:
            if child not in programs:
                raise ValueError(f"unknown program {child!r} held by {parent.name!r}")
            programs[child].parent = parent.name

    roots = [p for p in parents if not p.parent]
    if not roots:
        raise ValueError("no bottom program found")
    root = roots[-1]

    def populate(program: Program) -> Program:
        program.subroutines = [populate(programs[s]) for s in program.supporting]
        return program

    return populate(root)


def _outlier(program: Program) -> tuple[Program | None, int]:
    """Return the child whose tower weight differs, and by how much."""
    by_weight: dict[int, list[Program]] = defaultdict(list)
    for sub in program.subroutines:
        by_weight[sub.total_weight()].append(sub)

    outlier = None
    outlier_weight = common_weight = 0
    for weight, subtrees in by_weight.items():
        if len(subtrees) == 1:
            outlier, outlier_weight = subtrees[0], weight
        else:
            common_weight = weight
    return outlier, outlier_weight - common_weight


def find_imbalance(root: Program) -> int:
    """Return the weight the single wrongly weighted program should have."""
    outlier, offset = _outlier(root)
    if outlier is None:
        raise ValueError("tower is balanced")

    while len({sub.total_weight() for sub in outlier.subroutines}) > 1:
        child, child_offset = _outlier(outlier)
        if child is None:
            raise ValueError(f"cannot locate imbalance above {outlier.name!r}")
        outlier, offset = child, child_offset

    return outlier.weight - offset if offset > 0 else outlier.weight + offset
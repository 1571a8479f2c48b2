"""Jump-offset maze: count steps until the program jumps out of the list."""

from __future__ import annotations


def parse_jump_instructions(raw_instructions: str) -> list[int]:
    """One offset per line."""
    return [int(line) for line in raw_instructions.splitlines()]


def jump_iterations(instructions: list[int]) -> int:
    """Steps to leave the list; offsets of 3 or more shrink, others grow."""
    offsets = list(instructions)
    location = 0
    iterations = 0
    while location < len(offsets):
        if location < 0:
            raise IndexError(f"jumped to offset {location}, before the first instruction")
        offset = offsets[location]
        offsets[location] += -1 if offset >= 3 else 1
        location += offset
        iterations += 1
    return iterations


def derive_jump_iterations(raw_instructions: str) -> int:
    return jump_iterations(parse_jump_instructions(raw_instructions))
"""A minimal intcode machine supporting addition, multiplication and halt."""

from __future__ import annotations

import operator
from collections.abc import Callable
from enum import IntEnum

Modifier = Callable[[list[int]], list[int]]


class OpCode(IntEnum):
    ADD = 1
    MULTIPLY = 2
    HALT = 99


_OPERATIONS = {OpCode.ADD: operator.add, OpCode.MULTIPLY: operator.mul}


def parse_program(text: str) -> list[int]:
    """Read the comma separated integers on the first line."""
    lines = text.splitlines()
    first = lines[0] if lines else ""
    try:
        return [int(part) for part in first.split(",")]
    except ValueError as exc:
        raise ValueError(f"malformed intcode program: {first!r}") from exc


def run(program: list[int], *args: Modifier) -> list[int]:
    """Apply each modifier, then execute the program in place until it halts."""
    for modifier in args:
        program = modifier(program)

    pc = 0
    while True:
        if pc >= len(program):
            raise IndexError("program ran past its end without halting")
        code = program[pc]
        if code == OpCode.HALT:
            return program
        try:
            operation = _OPERATIONS[OpCode(code)]
        except ValueError:
            raise ValueError(f"unknown opcode {code} at position {pc}") from None
        x = program[program[pc + 1]]
        y = program[program[pc + 2]]
        program[program[pc + 3]] = operation(x, y)
        pc += 4


def run_intcode_machine(text: str, *args: Modifier) -> list[int]:
    """Parse and run a program, returning its final memory."""
    return run(parse_program(text), *args)


def reverse_engineer_intcode_machine(text: str, desired_output: int) -> tuple[int, int]:
    """Find the first noun and verb (0-99) for which position 0 ends up as ``desired_output``."""
    program = parse_program(text)
    for noun in range(100):
        for verb in range(100):

            def set_inputs(values: list[int], noun: int = noun, verb: int = verb) -> list[int]:
                values[1] = noun
                values[2] = verb
                return values

            if run(list(program), set_inputs)[0] == desired_output:
                return noun, verb
    raise ValueError(f"no noun and verb produce {desired_output}")
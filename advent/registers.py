"""Parsing of conditional register instructions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Operation(Enum):
    INCREMENT = 1
    DECREMENT = 2


class Comparator(Enum):
    GT = 1
    LT = 2
    EQ = 3
    GTE = 4
    LTE = 5


_OPERATIONS = {"inc": Operation.INCREMENT, "dec": Operation.DECREMENT}

_COMPARATORS = {
    ">": Comparator.GT,
    "<": Comparator.LT,
    "==": Comparator.EQ,
    ">=": Comparator.GTE,
    "<=": Comparator.LTE,
}


@dataclass(frozen=True)
class Condition:
    """A guard such as ``a > 1``; the default value means no guard."""

    register: str = ""
    comparator: Comparator | None = None
    value: int = 0

    def is_zero(self) -> bool:
        return self == Condition()


@dataclass(frozen=True)
class Instruction:
    register: str
    operation: Operation
    operand: int
    condition: Condition = field(default_factory=Condition)


def _lookup(table: dict, token: str, kind: str):
    try:
        return table[token]
    except KeyError:
        raise ValueError(f"unknown {kind}: {token!r}") from None


def parse_instruction(raw_instruction: str) -> Instruction:
    """Parse a line such as ``b inc 5 if a > 1``."""
    parts = raw_instruction.split()
    if len(parts) < 3:
        raise ValueError(f"malformed instruction: {raw_instruction!r}")

    condition = Condition()
    if len(parts) > 3:
        if len(parts) < 7:
            raise ValueError(f"malformed condition: {raw_instruction!r}")
        register, comparator, value = parts[4:7]
        condition = Condition(
            register=register,
            comparator=_lookup(_COMPARATORS, comparator, "comparator"),
            value=int(value),
        )

    return Instruction(
        register=parts[0],
        operation=_lookup(_OPERATIONS, parts[1], "operation"),
        operand=int(parts[2]),
        condition=condition,
    )
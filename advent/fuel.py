"""Fuel needed to launch modules of a given mass."""

from __future__ import annotations


def fuel_for_mass(mass: int) -> int:
    """A third of the mass, rounded toward zero, less two."""
    third = abs(mass) // 3
    return (third if mass >= 0 else -third) - 2


def _masses(text: str) -> list[int]:
    return [int(line) for line in text.splitlines() if line.strip()]


def total_fuel_requirement(text: str) -> int:
    """Sum of the fuel for every module mass, one per line."""
    return sum(fuel_for_mass(mass) for mass in _masses(text))


def _fuel_including_itself(mass: int) -> int:
    fuel = fuel_for_mass(mass)
    total = fuel
    while fuel > 0:
        fuel = fuel_for_mass(fuel)
        if fuel > 0:
            total += fuel
    return total


def total_fuel_requirement_including_fuel_mass(text: str) -> int:
    """Like ``total_fuel_requirement`` but also fuelling the added fuel."""
    return sum(_fuel_including_itself(mass) for mass in _masses(text))
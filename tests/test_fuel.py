import pytest

from advent.fuel import (
    fuel_for_mass,
    total_fuel_requirement,
    total_fuel_requirement_including_fuel_mass,
)

MASSES = """12
14
1969
100756"""


@pytest.mark.parametrize(
    "mass, expected",
    [(12, 2), (14, 2), (1969, 654), (100756, 33583)],
)
def test_fuel_for_mass(mass, expected):
    assert fuel_for_mass(mass) == expected


def test_total_fuel_requirement():
    assert total_fuel_requirement(MASSES) == 34241


def test_total_fuel_requirement_including_fuel_mass():
    assert total_fuel_requirement_including_fuel_mass(MASSES) == 51316


def test_including_fuel_for_small_module():
    assert total_fuel_requirement_including_fuel_mass("14") == 2


def test_including_fuel_is_at_least_plain_fuel():
    assert total_fuel_requirement_including_fuel_mass(MASSES) >= total_fuel_requirement(MASSES)


def test_blank_lines_are_ignored():
    assert total_fuel_requirement("12\n\n14\n") == 4


def test_non_numeric_mass_raises():
    with pytest.raises(ValueError):
        total_fuel_requirement("twelve")
import pytest

from advent.adapters import count_distinct_possible_arrangements, find_jolt_differences

EXAMPLE = """16
10
15
5
1
11
7
19
6
12
4"""


def test_find_jolt_differences():
    assert find_jolt_differences(EXAMPLE) == {1: 7, 3: 5}


def test_count_distinct_possible_arrangements():
    assert count_distinct_possible_arrangements(EXAMPLE) == 8


def test_jolt_differences_reject_gap():
    with pytest.raises(ValueError):
        find_jolt_differences("1\n9")


def test_arrangements_reject_empty_input():
    with pytest.raises(ValueError):
        count_distinct_possible_arrangements("")
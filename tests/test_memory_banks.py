import pytest

from advent.memory_banks import num_unique_distributions, redistribute, serialize


def test_num_unique_distributions():
    assert num_unique_distributions([0, 2, 7, 0]) == (5, 4)


def test_serialization():
    assert serialize([0, 2, 7, 0]) == "0-2-7-0"


def test_redistribution():
    memory = [0, 2, 7, 0]
    redistribute(memory)
    assert memory == [2, 4, 1, 2]


def test_redistribution_ties_pick_first():
    memory = [3, 1, 2, 3]
    redistribute(memory)
    assert memory == [0, 2, 3, 4]


def test_redistribution_keeps_block_count():
    memory = [5, 0, 9, 1, 4]
    redistribute(memory)
    assert sum(memory) == 19


def test_redistribute_empty_raises():
    with pytest.raises(ValueError):
        redistribute([])
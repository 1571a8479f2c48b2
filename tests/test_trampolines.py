import pytest

from advent.trampolines import (
    derive_jump_iterations,
    jump_iterations,
    parse_jump_instructions,
)


def test_parse_jump_instructions():
    assert parse_jump_instructions("0\n3\n0\n1\n-3") == [0, 3, 0, 1, -3]


def test_jump_iterations():
    assert jump_iterations([0, 3, 0, 1, -3]) == 10


def test_derive_jump_iterations():
    assert derive_jump_iterations("0\n3\n0\n1\n-3") == 10


def test_input_list_is_left_untouched():
    offsets = [0, 3, 0, 1, -3]
    jump_iterations(offsets)
    assert offsets == [0, 3, 0, 1, -3]


def test_jump_before_start_raises():
    with pytest.raises(IndexError):
        jump_iterations([-1])
import pytest

from advent.boarding import find_max_seat_id, find_missing_seat_id, find_seat_location


def _encode(row, column):
    row_part = "".join("B" if row & (1 << bit) else "F" for bit in range(6, -1, -1))
    column_part = "".join("R" if column & (1 << bit) else "L" for bit in range(2, -1, -1))
    return row_part + column_part


def test_worked_example():
    assert find_seat_location("FBFBBFFRLR") == (44, 5)
    assert find_max_seat_id("FBFBBFFRLR") == 357


@pytest.mark.parametrize("row,column", [(0, 0), (127, 7), (70, 7), (14, 3), (102, 4)])
def test_location_round_trip(row, column):
    assert find_seat_location(_encode(row, column)) == (row, column)


def test_max_seat_id_is_largest():
    seats = [(3, 1), (90, 6), (12, 7)]
    text = "\n".join(_encode(r, c) for r, c in seats)
    assert find_max_seat_id(text) == max(r * 8 + c for r, c in seats)


def test_max_seat_id_of_nothing_is_zero():
    assert find_max_seat_id("") == 0


def test_missing_seat_id_finds_gap():
    ids = [seat for seat in range(100, 120) if seat != 111]
    text = "\n".join(_encode(seat // 8, seat % 8) for seat in reversed(ids))
    assert find_missing_seat_id(text) == 111


def test_missing_seat_id_without_gap_is_zero():
    text = "\n".join(_encode(seat // 8, seat % 8) for seat in range(40, 50))
    assert find_missing_seat_id(text) == 0


def test_short_pass_is_rejected():
    with pytest.raises(ValueError):
        find_seat_location("FBF")
import pytest

from advent.spreadsheet import checksum


def test_checksum_example():
    assert checksum("5 10 9 7\n7 6 3\n9 4 6 8") == 6


def test_single_row():
    assert checksum("3 12") == 4


def test_empty_row_is_rejected():
    with pytest.raises(ValueError):
        checksum("4 2\n\n6 3")


def test_empty_sheet_sums_to_zero():
    assert checksum("") == 0
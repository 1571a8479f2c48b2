import pytest

from advent.box_ids import checksum, common_box_ids, levenshtein_distance


def test_checksum():
    given = "abcdef\nbababc\nabbcde\nabcccd\naabcdd\nabcdee\nababab"
    assert checksum(given) == 12


def test_checksum_without_triples_is_zero():
    assert checksum("aabc\nbbcd") == 0


def test_common_box_ids():
    given = "abcde\nfghij\nklmno\npqrst\nfguij\naxcye\nwvxyz"
    assert common_box_ids(given) == "fgij"


def test_common_box_ids_without_pair():
    assert common_box_ids("abc\nxyz") == ""


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("abc", "abc", 0),
        ("abc", "abd", 1),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
    ],
)
def test_levenshtein_distance(a, b, expected):
    assert levenshtein_distance(a, b) == expected


def test_levenshtein_is_symmetric():
    assert levenshtein_distance("flaw", "lawn") == levenshtein_distance("lawn", "flaw")
import pytest

from advent.captcha import inverse_captcha


@pytest.mark.parametrize(
    "given, expected",
    [
        ("1212", 6),
        ("1221", 0),
        ("123425", 4),
        ("123123", 12),
        ("12131415", 4),
    ],
)
def test_inverse_captcha(given, expected):
    assert inverse_captcha(given) == expected


def test_empty_captcha_is_zero():
    assert inverse_captcha("") == 0
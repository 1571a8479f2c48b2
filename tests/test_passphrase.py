import pytest

from advent.passphrase import count_valid_passphrases, is_valid_passphrase


@pytest.mark.parametrize(
    "given, valid",
    [
        ("abcde fghij", True),
        ("abcde xyz ecdab", False),
        ("a ab abc abd abf abj", True),
        ("iiii oiii ooii oooi oooo", True),
        ("oiii ioii iioi iiio", False),
    ],
)
def test_passphrase_validation(given, valid):
    assert is_valid_passphrase(given) is valid


def test_count_valid_passphrases():
    assert count_valid_passphrases("aa bb cc dd aaa\naa bb cc dd aa\naa bb cc dd ee") == 2
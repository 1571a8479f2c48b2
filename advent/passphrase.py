"""Passphrase validation: no two words may be anagrams of each other."""


def is_valid_passphrase(passphrase: str) -> bool:
    """True when no word in the passphrase is an anagram of another."""
    words = passphrase.split()
    return len({"".join(sorted(word)) for word in words}) == len(words)


def count_valid_passphrases(passphrases: str) -> int:
    """Count the valid passphrases, one per line."""
    return sum(is_valid_passphrase(line) for line in passphrases.splitlines())
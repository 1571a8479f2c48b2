"""Inverse captcha: sum digits that match the digit halfway around the list."""


def inverse_captcha(captcha: str) -> int:
    """Sum every digit equal to the one half the sequence length ahead (circularly)."""
    length = len(captcha)
    offset = length // 2
    return sum(
        int(digit)
        for i, digit in enumerate(captcha)
        if digit == captcha[(i + offset) % length]
    )
"""Door and card handshake: recover a loop size and derive the shared key."""

from __future__ import annotations

from dataclasses import dataclass

MODULUS = 20201227
SUBJECT_NUMBER = 7


@dataclass
class Encryptor:
    loop_number: int = 0

    def derive_loop_number(self, public_key: int) -> None:
        """Find how many transformations of 7 produce ``public_key``."""
        if not 1 <= public_key < MODULUS:
            raise ValueError(f"public key out of range: {public_key}")
        value = 1
        loops = 0
        while value != public_key:
            value = value * SUBJECT_NUMBER % MODULUS
            loops += 1
            if value == 1:
                raise ValueError(f"no loop number yields {public_key}")
        self.loop_number = loops

    def encrypt(self, public_key: int) -> int:
        """Transform ``public_key`` by this encryptor's loop number."""
        return pow(public_key, self.loop_number, MODULUS)


def determine_encryption_key(text: str) -> int:
    """Encryption key from the door's and the card's public keys, one per line."""
    keys = [int(line) for line in text.splitlines() if line.strip()]
    if len(keys) < 2:
        raise ValueError("two public keys are required")
    door = Encryptor()
    door.derive_loop_number(keys[0])
    return door.encrypt(keys[1])
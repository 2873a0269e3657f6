"""Random strings for tokens and one-time passwords (not for salts)."""

from __future__ import annotations

import string

from credhash.entropy.base import RandomnessSource
from credhash.entropy.system import SystemRandomness
from credhash.exceptions import InvalidParameters

ALPHANUMERIC = string.digits + string.ascii_uppercase + string.ascii_lowercase
SYMBOLS = "!@#$%&*?"


class RandomStringGenerator:
    """Draws characters uniformly from ``[0-9A-Za-z]`` (plus symbols if complex)."""

    def __init__(self, randomness: RandomnessSource | None = None):
        self._randomness = randomness or SystemRandomness()

    def generate(self, length: int = 24, complex: bool = False) -> str:
        if length < 0:
            raise InvalidParameters(f"length must be non-negative (got {length})")
        alphabet = ALPHANUMERIC + SYMBOLS if complex else ALPHANUMERIC
        size = len(alphabet)
        # bytes at or above this bound would bias the modulo, so they are redrawn
        bound = 256 - 256 % size

        chars: list[str] = []
        while len(chars) < length:
            for byte in self._randomness.random_bytes(length - len(chars)):
                if byte < bound:
                    chars.append(alphabet[byte % size])
        return "".join(chars)

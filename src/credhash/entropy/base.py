"""Randomness source protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomnessSource(Protocol):
    """Interface for cryptographically secure byte sources."""

    def random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Must raise :class:`~credhash.exceptions.RandomnessUnavailable`
        rather than fall back to a non-cryptographic generator.
        """
        ...

"""Shared fixtures: deterministic randomness sources."""

from __future__ import annotations

import pytest

from credhash.exceptions import RandomnessUnavailable


class CountingRandomness:
    """Deterministic stand-in: bytes 0, 1, 2, ... wrapping at 256."""

    def __init__(self, start: int = 0):
        self._next = start
        self.requests: list[int] = []

    def random_bytes(self, n: int) -> bytes:
        self.requests.append(n)
        out = bytes((self._next + i) % 256 for i in range(n))
        self._next = (self._next + n) % 256
        return out


class BrokenRandomness:
    def random_bytes(self, n: int) -> bytes:
        raise RandomnessUnavailable("entropy pool gone")


@pytest.fixture()
def counting() -> CountingRandomness:
    return CountingRandomness()


@pytest.fixture()
def broken() -> BrokenRandomness:
    return BrokenRandomness()

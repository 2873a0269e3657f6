"""Length-constant byte comparison."""

from __future__ import annotations


def constant_time_equal(a: bytes, b: bytes) -> bool:
    """Compare *a* and *b* without exiting early on the first mismatch.

    Every index of the common prefix is visited. The length check leaks only
    the operand lengths, which are public parameters of the hash scheme.
    """
    diff = len(a) ^ len(b)
    for x, y in zip(a, b):
        diff |= x ^ y
    return diff == 0

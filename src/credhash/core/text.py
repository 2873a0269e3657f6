"""Byte/text helpers shared across the core."""

from __future__ import annotations


def as_bytes(value: str | bytes | bytearray) -> bytes:
    """Return *value* as bytes, UTF-8 encoding text."""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")

"""Unsalted MD5 digests kept only to verify old stored credentials."""

from __future__ import annotations

import hashlib

from credhash.core.text import as_bytes

LEGACY_DIGEST_BYTES = 16


def legacy_digest(password: str | bytes) -> bytes:
    """Single-round, unsalted MD5 of *password*. Never use for new hashes."""
    return hashlib.md5(as_bytes(password), usedforsecurity=False).digest()

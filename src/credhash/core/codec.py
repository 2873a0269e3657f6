"""Encode and decode the self-describing stored-hash string.

Two grammars are accepted:

* ``algorithm:iterations:salt_b64:key_b64`` (exactly four fields)
* exactly 32 hexadecimal characters without a colon (legacy MD5 digest)

Anything else is rejected with :class:`MalformedHash`. Error messages never
echo the input, which may be a credential.
"""

from __future__ import annotations

import base64
import binascii
import re

from credhash.core.algorithms import normalize_algorithm
from credhash.core.types import HashRecord, LegacyDigest, ModernHash
from credhash.exceptions import MalformedHash

HASH_SECTIONS = 4
_LEGACY_RE = re.compile(r"[0-9A-Fa-f]{32}")
_ITERATIONS_RE = re.compile(r"[0-9]+")


def encode(record: HashRecord) -> str:
    if isinstance(record, ModernHash):
        return ":".join(
            (record.algorithm, str(record.iterations), _b64encode(record.salt), _b64encode(record.key))
        )
    if isinstance(record, LegacyDigest):
        return record.digest.hex()
    raise TypeError(f"not a hash record: {type(record).__name__}")


def decode(stored: str) -> HashRecord:
    """Parse *stored* into a :class:`ModernHash` or :class:`LegacyDigest`.

    Raises :class:`MalformedHash` for any other shape and
    :class:`UnsupportedAlgorithm` for a well-formed hash naming an unknown
    primitive.
    """
    if not isinstance(stored, str):
        raise MalformedHash(f"stored hash must be a string, got {type(stored).__name__}")

    fields = stored.split(":")
    if len(fields) < HASH_SECTIONS:
        if len(fields) == 1 and _LEGACY_RE.fullmatch(stored):
            return LegacyDigest(digest=bytes.fromhex(stored))
        raise MalformedHash("stored hash has too few fields and is not a legacy digest")
    if len(fields) > HASH_SECTIONS:
        raise MalformedHash(f"stored hash has {len(fields)} fields, expected {HASH_SECTIONS}")

    algorithm_raw, iterations_raw, salt_b64, key_b64 = fields
    algorithm = normalize_algorithm(algorithm_raw)

    if not _ITERATIONS_RE.fullmatch(iterations_raw):
        raise MalformedHash("iteration field is not a decimal integer")
    iterations = int(iterations_raw)
    if iterations < 1:
        raise MalformedHash("iteration count must be positive")

    salt = _b64decode(salt_b64, "salt")
    key = _b64decode(key_b64, "key")
    if not key:
        raise MalformedHash("derived key field is empty")

    return ModernHash(algorithm=algorithm, iterations=iterations, salt=salt, key=key)


def _b64encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def _b64decode(value: str, field: str) -> bytes:
    try:
        raw = base64.b64decode(value.encode("ascii"), validate=True)
    except (ValueError, binascii.Error) as exc:
        raise MalformedHash(f"{field} field is not valid base64") from exc
    # reject non-canonical padding bits so that encode(decode(s)) == s
    if _b64encode(raw) != value:
        raise MalformedHash(f"{field} field is not canonical base64")
    return raw

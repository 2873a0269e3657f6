"""PBKDF2 key derivation (RFC 2898), test vectors in RFC 6070."""

from __future__ import annotations

import hmac
import struct

from credhash.core.algorithms import normalize_algorithm
from credhash.core.text import as_bytes
from credhash.exceptions import InvalidParameters


def derive(
    algorithm: str,
    password: str | bytes,
    salt: bytes,
    iterations: int,
    key_length: int,
) -> bytes:
    """Derive a *key_length*-byte key from *password* and *salt*.

    Each output block is the XOR of ``iterations`` chained HMAC outputs, the
    first of which is keyed over ``salt || uint32_be(block_index)``. The
    concatenated blocks are truncated to *key_length*, which need not match
    the primitive's native digest size.
    """
    name = normalize_algorithm(algorithm)
    if iterations <= 0 or key_length <= 0:
        raise InvalidParameters(
            f"iterations and key_length must be positive "
            f"(got iterations={iterations}, key_length={key_length})"
        )

    prf = hmac.new(as_bytes(password), digestmod=name)
    h_len = prf.digest_size
    block_count = -(-key_length // h_len)
    salt = as_bytes(salt)

    output = bytearray()
    for index in range(1, block_count + 1):
        u = _apply(prf, salt + struct.pack(">I", index))
        xorsum = int.from_bytes(u, "big")
        for _ in range(iterations - 1):
            u = _apply(prf, u)
            xorsum ^= int.from_bytes(u, "big")
        output += xorsum.to_bytes(h_len, "big")

    return bytes(output[:key_length])


def derive_hex(
    algorithm: str,
    password: str | bytes,
    salt: bytes,
    iterations: int,
    key_length: int,
) -> str:
    """Same as :func:`derive`, hex-encoded (``2 * key_length`` characters)."""
    return derive(algorithm, password, salt, iterations, key_length).hex()


def _apply(prf: hmac.HMAC, data: bytes) -> bytes:
    mac = prf.copy()
    mac.update(data)
    return mac.digest()

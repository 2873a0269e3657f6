"""Registry of keyed-hash primitives usable with PBKDF2."""

from __future__ import annotations

import hashlib

from credhash.exceptions import UnsupportedAlgorithm

# shake_* have no fixed digest size and cannot back an HMAC
SUPPORTED_ALGORITHMS: frozenset[str] = frozenset(
    name for name in hashlib.algorithms_guaranteed if not name.startswith("shake_")
)

DEFAULT_ALGORITHM = "sha256"


def normalize_algorithm(name: str) -> str:
    """Return the canonical (lower-case) name of *name*.

    Raises :class:`UnsupportedAlgorithm` when it is not in the registry.
    """
    if not isinstance(name, str):
        raise UnsupportedAlgorithm(repr(name))
    canonical = name.lower()
    if canonical not in SUPPORTED_ALGORITHMS:
        raise UnsupportedAlgorithm(name)
    return canonical


def digest_size(name: str) -> int:
    """Native output length in bytes of the named primitive."""
    return hashlib.new(normalize_algorithm(name)).digest_size

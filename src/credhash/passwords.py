"""Module-level shortcuts over the default hasher and verifier."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from credhash.config import HashingConfig
from credhash.hasher import PasswordHasher
from credhash.tokens import RandomStringGenerator
from credhash.verifier import PasswordVerifier


def hash_password(
    password: str | bytes,
    config: HashingConfig | Mapping[str, Any] | None = None,
) -> str:
    """Hash a password. Returns 'algorithm:iterations:salt_b64:key_b64'."""
    return PasswordHasher(config).create(password)


def verify_password(password: str | bytes, stored: str, *, text_salt: bool = False) -> bool:
    """Verify a password against a stored hash (modern or legacy)."""
    return PasswordVerifier(text_salt=text_salt).verify(password, stored)


def random_string(length: int = 24, complex: bool = False) -> str:
    return RandomStringGenerator().generate(length, complex)

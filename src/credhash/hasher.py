"""Write path: create a new encoded password hash."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from typing import Any

from credhash.config import HashingConfig
from credhash.core.codec import encode
from credhash.core.kdf import derive
from credhash.core.types import ModernHash
from credhash.entropy.base import RandomnessSource
from credhash.entropy.system import SystemRandomness


class PasswordHasher:
    """Salts and stretches passwords into ``algorithm:iterations:salt:key``.

    >>> hasher = PasswordHasher()
    >>> stored = hasher.create("S3cr3t!")
    >>> stored.split(":")[:2]
    ['sha256', '1000']
    """

    def __init__(
        self,
        config: HashingConfig | Mapping[str, Any] | None = None,
        *,
        randomness: RandomnessSource | None = None,
    ):
        self._config = HashingConfig.coerce(config)
        self._randomness = randomness or SystemRandomness()

    @property
    def config(self) -> HashingConfig:
        return self._config

    def create(
        self,
        password: str | bytes,
        config: HashingConfig | Mapping[str, Any] | None = None,
    ) -> str:
        """Hash *password*. *config* overrides the hasher's own for this call."""
        cfg = self._config if config is None else HashingConfig.coerce(config)
        salt = self._randomness.random_bytes(cfg.salt_bytes)
        key = derive(
            cfg.algorithm,
            password,
            salt_input(salt, text_salt=cfg.text_salt),
            cfg.iterations,
            cfg.key_bytes,
        )
        return encode(
            ModernHash(algorithm=cfg.algorithm, iterations=cfg.iterations, salt=salt, key=key)
        )


def salt_input(salt: bytes, *, text_salt: bool = False) -> bytes:
    """Bytes fed to PBKDF2 as the salt: raw, or its base64 text in compat mode."""
    if text_salt:
        return base64.b64encode(salt)
    return salt

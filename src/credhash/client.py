"""User-facing Credentials client: hash, verify, upgrade."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from credhash.config import HashingConfig
from credhash.core.codec import decode
from credhash.core.types import LegacyDigest
from credhash.entropy.base import RandomnessSource
from credhash.entropy.system import SystemRandomness
from credhash.exceptions import MalformedHash, UnsupportedAlgorithm
from credhash.hasher import PasswordHasher
from credhash.tokens import RandomStringGenerator
from credhash.verifier import PasswordVerifier

log = logging.getLogger(__name__)

ConfigLike = HashingConfig | Mapping[str, Any]


class Credentials:
    """Password hashing for an account store.

    >>> creds = Credentials()
    >>> stored = creds.hash("S3cr3t!")
    >>> creds.verify("S3cr3t!", stored)
    True
    >>> creds.needs_rehash(stored)
    False
    """

    def __init__(
        self,
        config: ConfigLike | None = None,
        *,
        randomness: RandomnessSource | None = None,
    ):
        self._config = HashingConfig.coerce(config)
        self._randomness = randomness or SystemRandomness()
        self._hasher = PasswordHasher(self._config, randomness=self._randomness)
        self._verifier = PasswordVerifier(text_salt=self._config.text_salt)
        self._tokens = RandomStringGenerator(self._randomness)

    @classmethod
    def for_variant(
        cls,
        variant: str,
        cache: MutableMapping[str, HashingConfig],
        factory: Callable[[str], ConfigLike],
        *,
        randomness: RandomnessSource | None = None,
    ) -> Credentials:
        """Build a client for a named config variant, memoised in *cache*.

        The cache is owned by the caller; *factory* runs only on a miss.
        """
        config = cache.get(variant)
        if config is None:
            log.debug("Hashing config cache miss for variant %s", variant)
            config = HashingConfig.coerce(factory(variant))
            cache[variant] = config
        else:
            log.debug("Hashing config cache hit for variant %s", variant)
        return cls(config, randomness=randomness)

    @property
    def config(self) -> HashingConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def hash(self, password: str | bytes) -> str:
        """Hash a new password. Persist the result verbatim."""
        return self._hasher.create(password)

    def verify(self, password: str | bytes, stored: str) -> bool:
        """Check *password* against *stored*. Corrupt hashes are logged and fail."""
        try:
            record = decode(stored)
        except (MalformedHash, UnsupportedAlgorithm) as exc:
            log.warning("Rejected stored password hash: %s", exc)
            return False

        ok = self._verifier.verify_record(password, record)
        if ok and isinstance(record, LegacyDigest):
            log.info("Password matched a legacy MD5 digest; rehash recommended")
        return ok

    def needs_rehash(self, stored: str) -> bool:
        """True when *stored* was not produced with the active config."""
        try:
            record = decode(stored)
        except (MalformedHash, UnsupportedAlgorithm):
            return True
        if isinstance(record, LegacyDigest):
            return True
        cfg = self._config
        return (
            record.algorithm != cfg.algorithm
            or record.iterations != cfg.iterations
            or len(record.key) != cfg.key_bytes
        )

    def random_string(self, length: int = 24, complex: bool = False) -> str:
        """Token or temporary password; not suitable as a hash salt."""
        return self._tokens.generate(length, complex)

"""Credhash configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from credhash.core.algorithms import DEFAULT_ALGORITHM, normalize_algorithm
from credhash.exceptions import InvalidParameters

ENV_PREFIX = "CREDHASH_"
MIN_SALT_BYTES = 24


class HashingConfig(BaseModel):
    """Parameters for creating new password hashes."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    algorithm: str = DEFAULT_ALGORITHM
    iterations: int = Field(default=1000, ge=1)
    salt_bytes: int = Field(default=MIN_SALT_BYTES, ge=MIN_SALT_BYTES)
    key_bytes: int = Field(default=24, ge=1)
    # derive over the salt's base64 text, as hashes from older deployments do
    text_salt: bool = False

    @field_validator("algorithm")
    @classmethod
    def _supported(cls, value: str) -> str:
        return normalize_algorithm(value)

    @classmethod
    def coerce(cls, value: HashingConfig | Mapping[str, Any] | None) -> HashingConfig:
        """Accept a config, a mapping of options, or ``None`` for the defaults.

        Invalid option values raise :class:`InvalidParameters`.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        try:
            return cls(**dict(value))
        except ValidationError as exc:
            raise InvalidParameters(f"invalid hashing config: {exc}") from exc

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        prefix: str = ENV_PREFIX,
    ) -> HashingConfig:
        """Build a config from ``CREDHASH_*`` variables; unset ones keep defaults."""
        env = os.environ if environ is None else environ
        options = {}
        for name in cls.model_fields:
            raw = env.get(prefix + name.upper())
            if raw is not None:
                options[name] = raw
        return cls.coerce(options)

"""Decoded forms of a stored password hash."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from credhash.core.algorithms import normalize_algorithm
from credhash.core.legacy import LEGACY_DIGEST_BYTES


class ModernHash(BaseModel):
    """PBKDF2 record: ``algorithm:iterations:salt_b64:key_b64``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["modern"] = "modern"
    algorithm: str
    iterations: int = Field(ge=1)
    salt: bytes
    key: bytes = Field(min_length=1)

    @field_validator("algorithm")
    @classmethod
    def _supported(cls, value: str) -> str:
        return normalize_algorithm(value)


class LegacyDigest(BaseModel):
    """Unsalted MD5 digest, stored as 32 hex characters."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["legacy"] = "legacy"
    digest: bytes = Field(min_length=LEGACY_DIGEST_BYTES, max_length=LEGACY_DIGEST_BYTES)


HashRecord = Annotated[Union[ModernHash, LegacyDigest], Field(discriminator="kind")]

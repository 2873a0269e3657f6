"""Credhash: PBKDF2 password hashing with legacy digest support."""

from credhash.client import Credentials
from credhash.config import HashingConfig
from credhash.core.types import HashRecord, LegacyDigest, ModernHash
from credhash.exceptions import (
    CredhashError,
    InvalidParameters,
    MalformedHash,
    RandomnessUnavailable,
    UnsupportedAlgorithm,
)
from credhash.hasher import PasswordHasher
from credhash.passwords import hash_password, random_string, verify_password
from credhash.tokens import RandomStringGenerator
from credhash.verifier import PasswordVerifier

__version__ = "0.1.0"
__all__ = [
    "Credentials",
    "CredhashError",
    "HashRecord",
    "HashingConfig",
    "InvalidParameters",
    "LegacyDigest",
    "MalformedHash",
    "ModernHash",
    "PasswordHasher",
    "PasswordVerifier",
    "RandomStringGenerator",
    "RandomnessUnavailable",
    "UnsupportedAlgorithm",
    "hash_password",
    "random_string",
    "verify_password",
]

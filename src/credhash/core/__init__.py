"""Credhash core: key derivation, comparison and the stored-hash codec."""

from credhash.core.algorithms import SUPPORTED_ALGORITHMS, digest_size, normalize_algorithm
from credhash.core.codec import decode, encode
from credhash.core.compare import constant_time_equal
from credhash.core.kdf import derive, derive_hex
from credhash.core.legacy import legacy_digest
from credhash.core.types import HashRecord, LegacyDigest, ModernHash

__all__ = [
    "SUPPORTED_ALGORITHMS",
    "HashRecord",
    "LegacyDigest",
    "ModernHash",
    "constant_time_equal",
    "decode",
    "derive",
    "derive_hex",
    "digest_size",
    "encode",
    "legacy_digest",
    "normalize_algorithm",
]

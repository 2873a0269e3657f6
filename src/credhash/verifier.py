"""Read path: check a candidate password against a stored hash."""

from __future__ import annotations

from credhash.core.codec import decode
from credhash.core.compare import constant_time_equal
from credhash.core.kdf import derive
from credhash.core.legacy import legacy_digest
from credhash.core.text import as_bytes
from credhash.core.types import HashRecord, LegacyDigest
from credhash.exceptions import MalformedHash, UnsupportedAlgorithm
from credhash.hasher import salt_input


class PasswordVerifier:
    """Validates passwords against modern PBKDF2 hashes and legacy MD5 digests.

    A stored hash that cannot be decoded is a failed match, never an error;
    callers that care about corrupt records decode them separately.
    """

    def __init__(self, *, text_salt: bool = False):
        self._text_salt = text_salt

    def verify(self, password: str | bytes, stored: str) -> bool:
        secret = as_bytes(password)
        try:
            record = decode(stored)
        except (MalformedHash, UnsupportedAlgorithm):
            return False
        return self.verify_record(secret, record)

    def verify_record(self, password: str | bytes, record: HashRecord) -> bool:
        """Check *password* against an already decoded record."""
        secret = as_bytes(password)
        if isinstance(record, LegacyDigest):
            return constant_time_equal(legacy_digest(secret), record.digest)

        # derive fully before comparing, whatever the password looks like
        candidate = derive(
            record.algorithm,
            secret,
            salt_input(record.salt, text_salt=self._text_salt),
            record.iterations,
            len(record.key),
        )
        return constant_time_equal(candidate, record.key)

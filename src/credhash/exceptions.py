"""Credhash exceptions."""


class CredhashError(Exception):
    """Base exception for all credhash errors."""


class UnsupportedAlgorithm(CredhashError):
    """Raised when a hash algorithm name is not in the supported registry."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"Unsupported hash algorithm: {algorithm!r}")


class InvalidParameters(CredhashError):
    """Raised on non-positive iteration counts, key lengths or byte counts."""


class MalformedHash(CredhashError):
    """Raised when an encoded hash matches neither stored-hash grammar."""


class RandomnessUnavailable(CredhashError):
    """Raised when no cryptographically secure random source is reachable."""

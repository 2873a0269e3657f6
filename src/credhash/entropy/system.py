"""Operating-system CSPRNG (default source)."""

from __future__ import annotations

import os

from credhash.exceptions import InvalidParameters, RandomnessUnavailable


class SystemRandomness:
    """Reads from ``os.urandom``. Fails hard when the OS source is missing."""

    def random_bytes(self, n: int) -> bytes:
        if n < 0:
            raise InvalidParameters(f"byte count must be non-negative (got {n})")
        try:
            return os.urandom(n)
        except (NotImplementedError, OSError) as exc:
            raise RandomnessUnavailable("no operating-system CSPRNG is reachable") from exc

"""Randomness sources."""

from credhash.entropy.base import RandomnessSource
from credhash.entropy.system import SystemRandomness

__all__ = ["RandomnessSource", "SystemRandomness"]

"""Engine systems: deterministic RNG."""

from mazechase.systems.rng import DeterministicRNG, RandomSource

__all__ = ["DeterministicRNG", "RandomSource"]

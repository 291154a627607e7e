"""Domain-separated deterministic RNG using xxhash.

The outcome of step N depends only on the seed and the state after step
N-1. A random pick is a pure function of (seed, domain, entity id, step).
"""

from __future__ import annotations

import struct
from typing import Protocol

import xxhash

from mazechase.core.enums import Domain


class RandomSource(Protocol):
    """The interface the engine needs from a random-number source."""

    def next_int(self, domain: Domain, entity_id: int, tick: int, low: int, high: int) -> int: ...


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, entity_id, tick), with
    no internal mutable state.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, entity_id: int, tick: int) -> int:
        payload = struct.pack("<qiqi", self._seed, domain.value, entity_id, tick)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, entity_id: int, tick: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, entity_id, tick) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, entity_id: int, tick: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, entity_id, tick)
        return low + int(f * (high - low + 1))

    def choice(self, options: list, domain: Domain, entity_id: int, tick: int):
        """Pick one element of a non-empty list uniformly."""
        return options[self.next_int(domain, entity_id, tick, 0, len(options) - 1)]

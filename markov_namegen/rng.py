#!/usr/bin/env python3
"""
Random Sources
==============
Randomness providers for name generation.

A generator owns exactly one random source and draws from it through
``choices(population, weights=..., k=...)``.
Anything exposing that call works, including ``random.Random`` and
``secrets.SystemRandom``.

- TrueRandom: non-deterministic default backed by os.urandom()
- seeded(): deterministic ``random.Random`` for reproducible output
"""

import random
import secrets
from typing import Any, List, Optional, Sequence


# =============================================================================
# True Random Number Generator
# =============================================================================

class TrueRandom:
    """
    Cryptographically secure random number generator using hardware entropy.

    Draws from the system entropy pool through secrets.SystemRandom, so
    every instance yields an independent, non-reproducible stream.

    Cannot be seeded; use :func:`seeded` when output must be reproducible.
    """

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def choices(self, population: Sequence, weights: List[float] = None, k: int = 1) -> list:
        """Return k-sized list of elements chosen with optional weights."""
        if weights:
            return self._rng.choices(population, weights=weights, k=k)
        return [self._rng.choice(population) for _ in range(k)]


def seeded(seed: Optional[int]) -> random.Random:
    """Deterministic random source; identical seeds give identical streams."""
    return random.Random(seed)


def default_source() -> TrueRandom:
    """Fresh non-deterministic source, one per generator."""
    return TrueRandom()


def is_random_source(obj: Any) -> bool:
    """Duck-type check for the sampling call generators make."""
    return callable(getattr(obj, "choices", None))


__all__ = ['TrueRandom', 'seeded', 'default_source', 'is_random_source']

"""
Random Source Utility.

This module defines the uniform [0, 1) sampling capability consumed by the
bounded generator, plus the default seedable implementation.

Responsibility boundaries:
- A source only produces floats in [0.0, 1.0); scaling to integer ranges
  belongs to `core.bounded_random`.
- Generators accept a source instance, never instantiate `random` themselves.

Mutation constraints:
- The internal state of a source is mutated only when drawing.
- The seed can only be set once during initialization.
"""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything able to produce a uniform float in [0.0, 1.0)."""

    def next_double(self) -> float:
        ...


class SeededRandomSource:
    """
    Default random source backed by the standard library Mersenne Twister.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the source with an optional seed.

        Args:
            seed: An integer seed for deterministic sequences, or None to
                seed from OS entropy.
        """
        self._seed = seed
        self._rng_instance = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_double(self) -> float:
        """Draw a uniform random float in [0.0, 1.0)."""
        return self._rng_instance.random()

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed})"

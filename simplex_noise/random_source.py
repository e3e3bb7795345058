# simplex_noise/random_source.py

"""
================================================================================
RANDOM SOURCES
================================================================================
The permutation table is the only thing a seed influences, and building it
needs nothing more than a stream of uniform 32-bit integers. This module
defines that capability as a protocol and provides two seeded adapters.

Data Contract:
---------------
- Inputs: an integer seed (or None for OS entropy).
- Outputs: next_uint32() returns an int uniformly distributed in [0, 2**32).
- Side Effects: Each call advances the wrapped generator.
- Invariants: Two sources of the same class built from the same seed yield
  the same sequence.
================================================================================
"""
import random
from typing import Protocol

import numpy as np

_UINT32_LIMIT = 2**32


class RandomSource(Protocol):
    """
    A protocol defining the one operation the permutation builder needs.
    Any pseudo-random generator can be used as long as it provides this
    method.
    """
    def next_uint32(self) -> int: ...


class NumpyRandomSource:
    """Adapts a NumPy PCG64 generator (np.random.default_rng)."""

    def __init__(self, seed: int = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_uint32(self) -> int:
        return int(self._rng.integers(0, _UINT32_LIMIT, dtype=np.uint64))

    def __repr__(self):
        return f"NumpyRandomSource(seed={self.seed!r})"


class PythonRandomSource:
    """Adapts the standard library's Mersenne Twister."""

    def __init__(self, seed: int = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_uint32(self) -> int:
        return self._rng.getrandbits(32)

    def __repr__(self):
        return f"PythonRandomSource(seed={self.seed!r})"

# simplex_noise/generator.py

"""
================================================================================
SIMPLEX NOISE GENERATOR
================================================================================
This module contains the SimplexNoise class, which owns one permutation table
and exposes 2D, 3D and 4D noise evaluation bound to it.

Data Contract:
---------------
- Inputs (on initialization):
    - random_source: An object with next_uint32() (see random_source.py).
    - logger: An optional Python logging object for construction messages.
    - permutation_table: An optional pre-computed table to use instead of
      drawing one from the random source.
- Outputs (from methods):
    - Floats (or float64 arrays) in the range [-1, 1].
- Side Effects: Logs messages during construction only. Evaluation never logs.
- Invariants: The permutation table is read-only after construction, so a
  single instance can be shared between threads without locking.
================================================================================
"""
import logging

import numpy as np

from . import config as DEFAULTS
from . import noise
from .permutation import build_permutation_table, validate_permutation_table
from .random_source import NumpyRandomSource, RandomSource


class SimplexNoise:
    """
    A seeded simplex noise field. Construction fixes the permutation table;
    every evaluation after that is a pure function of the coordinates.
    """
    def __init__(self, random_source: RandomSource = None, logger: logging.Logger = None,
                 permutation_table: np.ndarray = None):
        """
        Initializes the generator.

        Args:
            random_source (RandomSource, optional): Source of uniform 32-bit
                integers used to shuffle the table. Defaults to a NumPy source
                seeded with DEFAULTS.DEFAULT_SEED.
            logger (logging.Logger, optional): The logger for construction output.
            permutation_table (np.ndarray, optional): A pre-computed table. If
                given, random_source is not consulted.

        Raises:
            ValueError: If permutation_table is not a permutation of 0..255.
        """
        self.logger = logger or logging.getLogger(__name__)

        if permutation_table is not None:
            self._perm = validate_permutation_table(permutation_table)
            self.logger.debug("Initialized with injected permutation table.")
        else:
            if random_source is None:
                random_source = NumpyRandomSource(DEFAULTS.DEFAULT_SEED)
                self.logger.debug(f"No random source provided, using seed {DEFAULTS.DEFAULT_SEED}.")
            self._perm = build_permutation_table(random_source)
            self.logger.debug(f"Permutation table built from {random_source!r}.")

        self.logger.info("SimplexNoise initialized.")

    @classmethod
    def from_seed(cls, seed: int, logger: logging.Logger = None) -> "SimplexNoise":
        """Builds a generator from an integer seed using NumpyRandomSource."""
        return cls(NumpyRandomSource(seed), logger=logger)

    @property
    def permutation_table(self) -> np.ndarray:
        """The read-only permutation table backing this generator."""
        return self._perm

    def noise2(self, x: float, y: float) -> float:
        return float(noise.simplex_noise_2d(self._perm, float(x), float(y)))

    def noise3(self, x: float, y: float, z: float) -> float:
        return float(noise.simplex_noise_3d(self._perm, float(x), float(y), float(z)))

    def noise4(self, x: float, y: float, z: float, w: float) -> float:
        return float(noise.simplex_noise_4d(self._perm, float(x), float(y), float(z), float(w)))

    def noise2_array(self, x, y) -> np.ndarray:
        """Element-wise noise2 over coordinate arrays that broadcast together."""
        return noise.simplex_noise_2d_array(self._perm, x, y)

    def noise3_array(self, x, y, z) -> np.ndarray:
        return noise.simplex_noise_3d_array(self._perm, x, y, z)

    def noise4_array(self, x, y, z, w) -> np.ndarray:
        return noise.simplex_noise_4d_array(self._perm, x, y, z, w)


def new_generator(random_source: RandomSource, logger: logging.Logger = None) -> SimplexNoise:
    """Builds a SimplexNoise whose table is shuffled by `random_source`."""
    return SimplexNoise(random_source, logger=logger)

# simplex_noise/__init__.py

# This file makes the 'simplex_noise' directory a Python package.
# We can also use it to define the public API of the package.

from .generator import SimplexNoise, new_generator
from .permutation import build_permutation_table, validate_permutation_table
from .random_source import NumpyRandomSource, PythonRandomSource, RandomSource

__all__ = [
    "SimplexNoise",
    "new_generator",
    "build_permutation_table",
    "validate_permutation_table",
    "RandomSource",
    "NumpyRandomSource",
    "PythonRandomSource",
]

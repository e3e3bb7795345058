# simplex_noise/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the noise
generator and the probe tool. These values are used if they are not explicitly
provided by the caller or on the command line.

DO NOT MODIFY THIS FILE FOR A SPECIFIC APPLICATION.
Instead, pass a seed or random source to the SimplexNoise instance.
================================================================================
"""

# --- Seeding ---
DEFAULT_SEED = 101

# --- Permutation Table ---
# The table is a permutation of 0..255 and lookups are masked with 0xFF, so
# these two values must always agree.
PERMUTATION_SIZE = 256
PERMUTATION_MASK = 0xFF

# --- Empirical Range Sweep ---
# Number of uniform points in [0, 1)^d to evaluate when checking the [-1, 1]
# bound, and how many of them to evaluate per compiled call.
DEFAULT_RANGE_SAMPLES = 1_000_000
RANGE_BATCH_SIZE = 100_000
NOISE_LOWER_BOUND = -1.0
NOISE_UPPER_BOUND = 1.0

# --- Benchmark ---
# A slowly drifting line through 2D noise space.
DEFAULT_BENCH_ITERATIONS = 1_000_000
BENCH_START_X = 0.001
BENCH_START_Y = 0.0001
BENCH_STEP_X = 0.00000011
BENCH_STEP_Y = 0.00000012

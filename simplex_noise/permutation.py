# simplex_noise/permutation.py

"""
================================================================================
PERMUTATION TABLE
================================================================================
Builds and validates the 256-entry permutation table that the noise kernels
use as a hash function for picking corner gradients.

Data Contract:
---------------
- Inputs:
    - source: any object with a next_uint32() method (see random_source.py).
- Outputs:
    - A read-only NumPy uint8 array of shape (256,) holding every value in
      0..255 exactly once.
- Side Effects: Draws 255 values from the source.
- Invariants: The same source state always produces the same table.
================================================================================
"""
import numpy as np

from . import config as DEFAULTS


def build_permutation_table(source) -> np.ndarray:
    """
    Shuffles the identity table using values drawn from `source`.

    Only the low 8 bits of each draw are used, and entry i is swapped with
    entry j only when j > i. This is not a textbook Fisher-Yates shuffle and
    must not be "fixed": the table (and therefore every noise value) for a
    given random stream depends on this exact rule.
    """
    table = np.arange(DEFAULTS.PERMUTATION_SIZE, dtype=np.uint8)
    for i in range(DEFAULTS.PERMUTATION_SIZE - 1):
        j = source.next_uint32() & DEFAULTS.PERMUTATION_MASK
        if j > i:
            table[i], table[j] = table[j], table[i]

    table.flags.writeable = False
    return table


def validate_permutation_table(table) -> np.ndarray:
    """
    Checks a caller-supplied table and returns it as a read-only uint8 array.

    Raises:
        ValueError: If the table does not hold exactly the values 0..255 once each.
    """
    values = np.asarray(table)
    if values.shape != (DEFAULTS.PERMUTATION_SIZE,):
        raise ValueError(
            f"Permutation table must have shape ({DEFAULTS.PERMUTATION_SIZE},), got {values.shape}"
        )
    if not np.issubdtype(values.dtype, np.integer):
        raise ValueError(f"Permutation table must hold integers, got dtype {values.dtype}")

    expected = np.arange(DEFAULTS.PERMUTATION_SIZE)
    if not np.array_equal(np.sort(values), expected):
        raise ValueError("Permutation table must contain each value 0..255 exactly once")

    checked = values.astype(np.uint8)  # always a fresh copy
    checked.flags.writeable = False
    return checked

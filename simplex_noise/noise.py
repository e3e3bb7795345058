# simplex_noise/noise.py

"""
================================================================================
SIMPLEX NOISE KERNELS
================================================================================
This module provides functions for evaluating 2D, 3D and 4D simplex noise. It
is designed to be a pure, stateless utility: all seeded state lives in the
permutation table passed in by the caller.

The algorithm follows Stefan Gustavson's "speed-improved" simplex noise
(public domain, with optimisations by Peter Eastman and the 2012 rank
ordering method for 4D).

Data Contract:
---------------
- Inputs:
    - perm: A permutation table of 0..255 (uint8 array, shape (256,)).
    - x, y[, z[, w]]: Finite floats, or NumPy arrays for the *_array helpers.
- Outputs:
    - A float (or float64 array) in the range [-1, 1]. The bound is empirical.
- Side Effects: None.
- Invariants: The same table and coordinates always give bit-identical output.
  Non-finite coordinates are outside the contract; the result is undefined.
================================================================================
"""
import math

import numpy as np
from numba import njit

# --- Skewing and Unskewing Factors ---
F2 = 0.5 * (math.sqrt(3.0) - 1.0)
G2 = (3.0 - math.sqrt(3.0)) / 6.0
F3 = 1.0 / 3.0
G3 = 1.0 / 6.0
F4 = (math.sqrt(5.0) - 1.0) / 4.0
G4 = (5.0 - math.sqrt(5.0)) / 20.0

# --- Radial Falloff (squared radius) and Output Scaling ---
FALLOFF_2D = 0.5
FALLOFF_3D = 0.6
FALLOFF_4D = 0.6
SCALE_2D = 70.0
SCALE_3D = 32.0
SCALE_4D = 27.0

# Gradients for 2D and 3D: the midpoints of the 12 edges of a cube.
# 2D only reads the first two components.
_GRAD3 = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
], dtype=np.float64)

# Gradients for 4D: the midpoints of the 32 edges of a tesseract.
_GRAD4 = np.array([
    [0, 1, 1, 1], [0, 1, 1, -1], [0, 1, -1, 1], [0, 1, -1, -1],
    [0, -1, 1, 1], [0, -1, 1, -1], [0, -1, -1, 1], [0, -1, -1, -1],
    [1, 0, 1, 1], [1, 0, 1, -1], [1, 0, -1, 1], [1, 0, -1, -1],
    [-1, 0, 1, 1], [-1, 0, 1, -1], [-1, 0, -1, 1], [-1, 0, -1, -1],
    [1, 1, 0, 1], [1, 1, 0, -1], [1, -1, 0, 1], [1, -1, 0, -1],
    [-1, 1, 0, 1], [-1, 1, 0, -1], [-1, -1, 0, 1], [-1, -1, 0, -1],
    [1, 1, 1, 0], [1, 1, -1, 0], [1, -1, 1, 0], [1, -1, -1, 0],
    [-1, 1, 1, 0], [-1, 1, -1, 0], [-1, -1, 1, 0], [-1, -1, -1, 0],
], dtype=np.float64)


# --- Shared Primitives ---

@njit
def _fast_floor(x):
    """Largest integer <= x. int() truncates toward zero, so correct negatives."""
    xi = int(x)
    return xi - 1 if x < xi else xi

@njit
def _hashed_index(perm, k):
    # Masking keeps negative cell indices in 0..255 (two's complement wrap).
    return int(perm[k & 255])

@njit
def _hash_mod12(perm, k):
    return _hashed_index(perm, k) % 12

@njit
def _corner_2d(gi, falloff, x, y):
    t = falloff - x * x - y * y
    if t < 0:
        return 0.0
    t *= t
    return t * t * (_GRAD3[gi, 0] * x + _GRAD3[gi, 1] * y)

@njit
def _corner_3d(gi, falloff, x, y, z):
    t = falloff - x * x - y * y - z * z
    if t < 0:
        return 0.0
    t *= t
    return t * t * (_GRAD3[gi, 0] * x + _GRAD3[gi, 1] * y + _GRAD3[gi, 2] * z)

@njit
def _corner_4d(gi, falloff, x, y, z, w):
    t = falloff - x * x - y * y - z * z - w * w
    if t < 0:
        return 0.0
    t *= t
    return t * t * (_GRAD4[gi, 0] * x + _GRAD4[gi, 1] * y
                    + _GRAD4[gi, 2] * z + _GRAD4[gi, 3] * w)


# --- Simplex Corner Ordering ---

@njit
def _simplex_offsets_3d(x0, y0, z0):
    """
    Picks which of the six tetrahedra of the skewed cube contains the point.
    Returns the integer offsets (i1, j1, k1, i2, j2, k2) of the second and
    third corners. The comparison directions decide ties and must stay as
    they are.
    """
    if x0 >= y0:
        if y0 >= z0:
            return 1, 0, 0, 1, 1, 0  # X Y Z
        elif x0 >= z0:
            return 1, 0, 0, 1, 0, 1  # X Z Y
        else:
            return 0, 0, 1, 1, 0, 1  # Z X Y
    else:
        if y0 < z0:
            return 0, 0, 1, 0, 1, 1  # Z Y X
        elif x0 < z0:
            return 0, 1, 0, 0, 1, 1  # Y Z X
        else:
            return 0, 1, 0, 1, 1, 0  # Y X Z

@njit
def _simplex_ranks_4d(x0, y0, z0, w0):
    """
    Ranks the four offsets by magnitude with six pairwise comparisons.
    Rank 3 is the largest. A tie goes to the second operand.
    """
    rank_x = 0
    rank_y = 0
    rank_z = 0
    rank_w = 0
    if x0 > y0:
        rank_x += 1
    else:
        rank_y += 1
    if x0 > z0:
        rank_x += 1
    else:
        rank_z += 1
    if x0 > w0:
        rank_x += 1
    else:
        rank_w += 1
    if y0 > z0:
        rank_y += 1
    else:
        rank_z += 1
    if y0 > w0:
        rank_y += 1
    else:
        rank_w += 1
    if z0 > w0:
        rank_z += 1
    else:
        rank_w += 1
    return rank_x, rank_y, rank_z, rank_w


# --- Noise Functions ---

@njit
def simplex_noise_2d(perm, x, y):
    """2D simplex noise at (x, y)."""
    # Skew the input space to find the simplex cell.
    h = (x + y) * F2
    i = _fast_floor(x + h)
    j = _fast_floor(y + h)
    t = (i + j) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    # The simplex is a triangle: lower (XY order) or upper (YX order).
    if x0 > y0:
        i1 = 1
        j1 = 0
    else:
        i1 = 0
        j1 = 1

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    ii = i & 255
    jj = j & 255
    gi0 = _hash_mod12(perm, ii + _hashed_index(perm, jj))
    gi1 = _hash_mod12(perm, ii + i1 + _hashed_index(perm, jj + j1))
    gi2 = _hash_mod12(perm, ii + 1 + _hashed_index(perm, jj + 1))

    n0 = _corner_2d(gi0, FALLOFF_2D, x0, y0)
    n1 = _corner_2d(gi1, FALLOFF_2D, x1, y1)
    n2 = _corner_2d(gi2, FALLOFF_2D, x2, y2)
    return SCALE_2D * (n0 + n1 + n2)

@njit
def simplex_noise_3d(perm, x, y, z):
    """3D simplex noise at (x, y, z)."""
    h = (x + y + z) * F3
    i = _fast_floor(x + h)
    j = _fast_floor(y + h)
    k = _fast_floor(z + h)
    t = (i + j + k) * G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    i1, j1, k1, i2, j2, k2 = _simplex_offsets_3d(x0, y0, z0)

    x1 = x0 - i1 + G3
    y1 = y0 - j1 + G3
    z1 = z0 - k1 + G3
    x2 = x0 - i2 + 2.0 * G3
    y2 = y0 - j2 + 2.0 * G3
    z2 = z0 - k2 + 2.0 * G3
    x3 = x0 - 1.0 + 3.0 * G3
    y3 = y0 - 1.0 + 3.0 * G3
    z3 = z0 - 1.0 + 3.0 * G3

    # Raw cell indices; _hashed_index does the masking.
    gi0 = _hash_mod12(perm, i + _hashed_index(perm, j + _hashed_index(perm, k)))
    gi1 = _hash_mod12(perm, i + i1 + _hashed_index(perm, j + j1 + _hashed_index(perm, k + k1)))
    gi2 = _hash_mod12(perm, i + i2 + _hashed_index(perm, j + j2 + _hashed_index(perm, k + k2)))
    gi3 = _hash_mod12(perm, i + 1 + _hashed_index(perm, j + 1 + _hashed_index(perm, k + 1)))

    n0 = _corner_3d(gi0, FALLOFF_3D, x0, y0, z0)
    n1 = _corner_3d(gi1, FALLOFF_3D, x1, y1, z1)
    n2 = _corner_3d(gi2, FALLOFF_3D, x2, y2, z2)
    n3 = _corner_3d(gi3, FALLOFF_3D, x3, y3, z3)
    return SCALE_3D * (n0 + n1 + n2 + n3)

@njit
def _hash_mod32(perm, i, j, k, l):
    return _hashed_index(
        perm, i + _hashed_index(perm, j + _hashed_index(perm, k + _hashed_index(perm, l)))
    ) % 32

@njit
def simplex_noise_4d(perm, x, y, z, w):
    """4D simplex noise at (x, y, z, w)."""
    h = (x + y + z + w) * F4
    i = _fast_floor(x + h)
    j = _fast_floor(y + h)
    k = _fast_floor(z + h)
    l = _fast_floor(w + h)
    t = (i + j + k + l) * G4
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)
    w0 = w - (l - t)

    rank_x, rank_y, rank_z, rank_w = _simplex_ranks_4d(x0, y0, z0, w0)

    # Corners are entered from the largest offset down. The fifth corner is
    # (1, 1, 1, 1) and needs no ranks.
    i1 = 1 if rank_x >= 3 else 0
    j1 = 1 if rank_y >= 3 else 0
    k1 = 1 if rank_z >= 3 else 0
    l1 = 1 if rank_w >= 3 else 0
    i2 = 1 if rank_x >= 2 else 0
    j2 = 1 if rank_y >= 2 else 0
    k2 = 1 if rank_z >= 2 else 0
    l2 = 1 if rank_w >= 2 else 0
    i3 = 1 if rank_x >= 1 else 0
    j3 = 1 if rank_y >= 1 else 0
    k3 = 1 if rank_z >= 1 else 0
    l3 = 1 if rank_w >= 1 else 0

    x1 = x0 - i1 + G4
    y1 = y0 - j1 + G4
    z1 = z0 - k1 + G4
    w1 = w0 - l1 + G4
    x2 = x0 - i2 + 2.0 * G4
    y2 = y0 - j2 + 2.0 * G4
    z2 = z0 - k2 + 2.0 * G4
    w2 = w0 - l2 + 2.0 * G4
    x3 = x0 - i3 + 3.0 * G4
    y3 = y0 - j3 + 3.0 * G4
    z3 = z0 - k3 + 3.0 * G4
    w3 = w0 - l3 + 3.0 * G4
    x4 = x0 - 1.0 + 4.0 * G4
    y4 = y0 - 1.0 + 4.0 * G4
    z4 = z0 - 1.0 + 4.0 * G4
    w4 = w0 - 1.0 + 4.0 * G4

    gi0 = _hash_mod32(perm, i, j, k, l)
    gi1 = _hash_mod32(perm, i + i1, j + j1, k + k1, l + l1)
    gi2 = _hash_mod32(perm, i + i2, j + j2, k + k2, l + l2)
    gi3 = _hash_mod32(perm, i + i3, j + j3, k + k3, l + l3)
    gi4 = _hash_mod32(perm, i + 1, j + 1, k + 1, l + 1)

    n0 = _corner_4d(gi0, FALLOFF_4D, x0, y0, z0, w0)
    n1 = _corner_4d(gi1, FALLOFF_4D, x1, y1, z1, w1)
    n2 = _corner_4d(gi2, FALLOFF_4D, x2, y2, z2, w2)
    n3 = _corner_4d(gi3, FALLOFF_4D, x3, y3, z3, w3)
    n4 = _corner_4d(gi4, FALLOFF_4D, x4, y4, z4, w4)
    return SCALE_4D * (n0 + n1 + n2 + n3 + n4)


# --- Array Evaluation ---
# Explicit loops over flat arrays, which Numba compiles to efficient machine
# code. Each element is exactly the scalar kernel's result.

@njit
def _noise_2d_flat(perm, x, y):
    out = np.empty(x.size, dtype=np.float64)
    for n in range(x.size):
        out[n] = simplex_noise_2d(perm, x[n], y[n])
    return out

@njit
def _noise_3d_flat(perm, x, y, z):
    out = np.empty(x.size, dtype=np.float64)
    for n in range(x.size):
        out[n] = simplex_noise_3d(perm, x[n], y[n], z[n])
    return out

@njit
def _noise_4d_flat(perm, x, y, z, w):
    out = np.empty(x.size, dtype=np.float64)
    for n in range(x.size):
        out[n] = simplex_noise_4d(perm, x[n], y[n], z[n], w[n])
    return out

def _flatten_coordinates(*coords):
    """Broadcasts coordinate arrays together and returns (shape, flat float64 copies)."""
    broadcast = np.broadcast_arrays(*(np.asarray(c, dtype=np.float64) for c in coords))
    shape = broadcast[0].shape
    flat = [np.ascontiguousarray(b).ravel() for b in broadcast]
    return shape, flat

def simplex_noise_2d_array(perm, x, y) -> np.ndarray:
    """Evaluates 2D noise element-wise over broadcastable coordinate arrays."""
    shape, (fx, fy) = _flatten_coordinates(x, y)
    return _noise_2d_flat(perm, fx, fy).reshape(shape)

def simplex_noise_3d_array(perm, x, y, z) -> np.ndarray:
    """Evaluates 3D noise element-wise over broadcastable coordinate arrays."""
    shape, (fx, fy, fz) = _flatten_coordinates(x, y, z)
    return _noise_3d_flat(perm, fx, fy, fz).reshape(shape)

def simplex_noise_4d_array(perm, x, y, z, w) -> np.ndarray:
    """Evaluates 4D noise element-wise over broadcastable coordinate arrays."""
    shape, (fx, fy, fz, fw) = _flatten_coordinates(x, y, z, w)
    return _noise_4d_flat(perm, fx, fy, fz, fw).reshape(shape)

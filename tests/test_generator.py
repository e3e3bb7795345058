# tests/test_generator.py
import logging
import math
import threading

import numpy as np
import pytest

from simplex_noise import (
    NumpyRandomSource,
    PythonRandomSource,
    SimplexNoise,
    new_generator,
)
from simplex_noise import config as DEFAULTS

PROBE_POINTS = [(0.0, 1.25), (0.3, 0.7), (-4.2, 9.1), (17.5, -3.25), (101.1, 55.5), (-0.6, -0.9)]


def _sample_all(gen, x, y):
    return (gen.noise2(x, y), gen.noise3(x, y, 0.5), gen.noise4(x, y, 0.5, -0.25))


def test_repeated_calls_are_identical(generator):
    for x, y in PROBE_POINTS:
        assert _sample_all(generator, x, y) == _sample_all(generator, x, y)


@pytest.mark.parametrize("source_cls", [NumpyRandomSource, PythonRandomSource])
def test_same_seed_same_field(source_cls):
    a = new_generator(source_cls(101))
    b = new_generator(source_cls(101))
    assert np.array_equal(a.permutation_table, b.permutation_table)
    for x, y in PROBE_POINTS:
        assert _sample_all(a, x, y) == _sample_all(b, x, y)


def test_from_seed_matches_numpy_source():
    a = SimplexNoise.from_seed(42)
    b = SimplexNoise(NumpyRandomSource(42))
    assert a.noise2(0.0, 1.25) == b.noise2(0.0, 1.25)


def test_default_source_uses_default_seed():
    a = SimplexNoise()
    b = SimplexNoise.from_seed(DEFAULTS.DEFAULT_SEED)
    assert np.array_equal(a.permutation_table, b.permutation_table)


def test_different_seeds_disagree():
    a = SimplexNoise.from_seed(101)
    b = SimplexNoise.from_seed(102)
    deltas = [abs(a.noise2(x, y) - b.noise2(x, y)) for x, y in PROBE_POINTS]
    assert max(deltas) > 0.0001


def test_permutation_table_is_valid(generator):
    table = generator.permutation_table
    assert sorted(table.tolist()) == list(range(256))
    assert not table.flags.writeable


def test_injected_table_is_used():
    table = np.arange(256, dtype=np.uint8)[::-1]
    gen = SimplexNoise(permutation_table=table)
    assert gen.permutation_table.tolist() == table.tolist()
    assert gen.noise2(0.3, 0.7) == SimplexNoise(permutation_table=table.tolist()).noise2(0.3, 0.7)


def test_injected_table_is_validated():
    with pytest.raises(ValueError):
        SimplexNoise(permutation_table=np.zeros(256, dtype=np.uint8))


def test_construction_is_logged(caplog):
    logger = logging.getLogger("test_generator")
    with caplog.at_level(logging.DEBUG, logger="test_generator"):
        SimplexNoise.from_seed(3, logger=logger)
    assert "SimplexNoise initialized." in caplog.text


@pytest.mark.parametrize("dims", [2, 3, 4])
def test_output_stays_within_unit_range(generator, dims):
    rng = np.random.default_rng(101)
    points = rng.random((dims, 1_000_000))
    evaluate = {2: generator.noise2_array, 3: generator.noise3_array, 4: generator.noise4_array}[dims]
    values = evaluate(*points)
    assert values.min() >= -1.0
    assert values.max() <= 1.0
    # A degenerate field (all zeros) would also pass the bound.
    assert values.std() > 0.01


@pytest.mark.parametrize("dims", [2, 3, 4])
def test_dense_line_has_no_jumps(generator, dims):
    t = np.arange(-3.0, 3.0, 1e-4)
    # A skewed line so that it crosses many simplex boundaries in every axis.
    coords = [t * (1.0 + 0.37 * d) + 0.11 * d for d in range(dims)]
    evaluate = {2: generator.noise2_array, 3: generator.noise3_array, 4: generator.noise4_array}[dims]
    values = evaluate(*coords)
    assert np.max(np.abs(np.diff(values))) < 0.5


def test_negative_coordinates(generator):
    for x, y in PROBE_POINTS:
        for value in _sample_all(generator, -abs(x) - 1000.5, -abs(y) - 2000.25):
            assert np.isfinite(value)
            assert -1.0 <= value <= 1.0


def test_field_repeats_every_256_cells_in_2d(generator):
    # Shifting both coordinates by 256/sqrt(3) moves the skewed cell by exactly
    # (256, 256), which the masked hash cannot tell apart.
    period = 256.0 / math.sqrt(3.0)
    for x, y in [(0.2, 0.2), (1.7, 1.7)]:
        assert generator.noise2(x, y) == pytest.approx(generator.noise2(x + period, y + period), abs=1e-9)


def test_scalar_and_array_agree(generator):
    xs = np.array([0.0, 0.3, -4.2, 17.5])
    ys = np.array([1.25, 0.7, 9.1, -3.25])
    out = generator.noise2_array(xs, ys)
    assert out.tolist() == [generator.noise2(x, y) for x, y in zip(xs, ys)]


def test_concurrent_reads_agree(generator):
    expected = [generator.noise3(x, y, 0.25) for x, y in PROBE_POINTS]
    results = []

    def worker():
        results.append([generator.noise3(x, y, 0.25) for x, y in PROBE_POINTS])

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [expected] * 4

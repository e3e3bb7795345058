# noise_probe.py

"""
================================================================================
NOISE PROBE SCRIPT
================================================================================
A command-line tool for inspecting a seeded simplex noise field: sample a
single point, sweep a large number of random points to check the [-1, 1]
output bound, time 2D evaluation, or dump the permutation table.

Usage:
    python noise_probe.py sample --seed 101 0 1.25
    python noise_probe.py range --dims 3 --samples 1000000
    python noise_probe.py bench --iterations 1000000
    python noise_probe.py table --seed 7
================================================================================
"""
import sys
import time
import logging
import argparse
import numpy as np
from tqdm import tqdm

from simplex_noise import SimplexNoise
from simplex_noise import config as DEFAULTS


def run_sample(generator: SimplexNoise, coords: list, logger: logging.Logger) -> float:
    """Evaluates the noise function matching the number of coordinates (2, 3 or 4)."""
    evaluators = {2: generator.noise2, 3: generator.noise3, 4: generator.noise4}
    value = evaluators[len(coords)](*coords)
    point = ", ".join(f"{c:g}" for c in coords)
    logger.info(f"noise{len(coords)}({point}) = {value:.4f}")
    return value


def run_range_check(generator: SimplexNoise, dims: int, samples: int, seed: int,
                    logger: logging.Logger, batch_size: int = DEFAULTS.RANGE_BATCH_SIZE) -> tuple[float, float]:
    """
    Evaluates `samples` uniform points in [0, 1)^dims and returns the observed
    (min, max). Points come from their own RNG so the sweep is reproducible.
    """
    evaluators = {2: generator.noise2_array, 3: generator.noise3_array, 4: generator.noise4_array}
    if dims not in evaluators:
        raise ValueError(f"Expected 2, 3 or 4 dimensions, got {dims}")
    evaluate = evaluators[dims]

    rng = np.random.default_rng(seed)
    min_value = np.inf
    max_value = -np.inf

    logger.info(f"Sweeping {samples} points in {dims}D...")
    remaining = samples
    with tqdm(total=samples, desc=f"Sampling noise{dims}", unit="pt") as progress:
        while remaining > 0:
            count = min(batch_size, remaining)
            points = rng.random((dims, count))
            values = evaluate(*points)
            min_value = min(min_value, float(values.min()))
            max_value = max(max_value, float(values.max()))
            remaining -= count
            progress.update(count)

    logger.info(f"noise{dims} observed range: [{min_value:.4f}, {max_value:.4f}]")
    return min_value, max_value


def run_benchmark(generator: SimplexNoise, iterations: int, logger: logging.Logger) -> float:
    """Times noise2 along a slowly drifting line. Returns nanoseconds per call."""
    x = DEFAULTS.BENCH_START_X
    y = DEFAULTS.BENCH_START_Y

    # Warm-up call so JIT compilation is not timed.
    generator.noise2(x, y)

    start_time = time.perf_counter()
    for _ in range(iterations):
        generator.noise2(x, y)
        x += DEFAULTS.BENCH_STEP_X
        y += DEFAULTS.BENCH_STEP_Y
    elapsed = time.perf_counter() - start_time

    ns_per_op = (elapsed * 1e9) / iterations
    logger.info(f"{iterations} calls in {elapsed:.2f} seconds ({ns_per_op:.0f} ns/op).")
    return ns_per_op


def positive_int(text: str) -> int:
    """argparse type for counts that must be at least 1."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect a seeded simplex noise field.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sample = subparsers.add_parser("sample", help="Evaluate noise at one point.")
    sample.add_argument("--seed", type=int, default=DEFAULTS.DEFAULT_SEED)
    sample.add_argument("coords", type=float, nargs="+", help="2, 3 or 4 coordinates.")

    sweep = subparsers.add_parser("range", help="Check the output bound over random points.")
    sweep.add_argument("--seed", type=int, default=DEFAULTS.DEFAULT_SEED)
    sweep.add_argument("--dims", type=int, choices=[2, 3, 4], default=2)
    sweep.add_argument("--samples", type=positive_int, default=DEFAULTS.DEFAULT_RANGE_SAMPLES)

    bench = subparsers.add_parser("bench", help="Time 2D evaluation.")
    bench.add_argument("--seed", type=int, default=DEFAULTS.DEFAULT_SEED)
    bench.add_argument("--iterations", type=positive_int, default=DEFAULTS.DEFAULT_BENCH_ITERATIONS)

    table = subparsers.add_parser("table", help="Print the permutation table.")
    table.add_argument("--seed", type=int, default=DEFAULTS.DEFAULT_SEED)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger = logging.getLogger("NoiseProbe")

    generator = SimplexNoise.from_seed(args.seed, logger=logger)

    if args.command == "sample":
        if len(args.coords) not in (2, 3, 4):
            parser.error("sample takes 2, 3 or 4 coordinates")
        run_sample(generator, args.coords, logger)

    elif args.command == "range":
        min_value, max_value = run_range_check(generator, args.dims, args.samples, args.seed, logger)
        if min_value < DEFAULTS.NOISE_LOWER_BOUND or max_value > DEFAULTS.NOISE_UPPER_BOUND:
            logger.error(f"FAILURE: noise{args.dims} left [-1, 1].")
            return 1
        logger.info("SUCCESS: all samples within [-1, 1].")

    elif args.command == "bench":
        run_benchmark(generator, args.iterations, logger)

    elif args.command == "table":
        values = generator.permutation_table.tolist()
        for row in range(0, len(values), 16):
            logger.info(" ".join(f"{v:3d}" for v in values[row:row + 16]))

    return 0


# --- Command-Line Interface ---
if __name__ == "__main__":
    sys.exit(main())

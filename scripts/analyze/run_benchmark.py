#!/usr/bin/env python3
"""Time the trace-analysis operations across several trace sizes."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
import logging
from pathlib import Path
import time

import numpy as np
import pandas as pd

from nr5g_spectrum.analysis import SpectrumPoint, compute_bounds, compute_noise_floor, find_peaks, nearest_point
from nr5g_spectrum.pipeline import process_spectrum
from nr5g_spectrum.plotting import build_coords

DEFAULT_SIZES = (256, 512, 1024, 2048)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=list(DEFAULT_SIZES),
        help="Trace sizes to benchmark.",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=1000,
        help="Timed calls per operation and size.",
    )
    parser.add_argument(
        "--warmup",
        type=int,
        default=100,
        help="Untimed calls before each measurement.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for the random benchmark traces.",
    )
    parser.add_argument(
        "--csv-out",
        type=Path,
        default=None,
        help="Optional output CSV for the timing table.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def random_trace(size: int, rng: np.random.Generator) -> list[SpectrumPoint]:
    """Ascending 1 MHz grid from 2.4 GHz with amplitudes uniform in [-100, -20)."""

    amplitude = -100.0 + rng.random(size) * 80.0
    return [
        SpectrumPoint(frequency=2.4e9 + index * 1e6, amplitude=float(amp))
        for index, amp in enumerate(amplitude)
    ]


def time_call(fn: Callable[[], object], *, iterations: int, warmup: int) -> float:
    """Return the mean wall time of ``fn`` in milliseconds."""

    for _ in range(warmup):
        fn()
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    return (time.perf_counter() - start) * 1e3 / iterations


def benchmark_table(
        sizes: Sequence[int],
        *,
        iterations: int,
        warmup: int,
        seed: int,
) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    rows: list[dict[str, float | int | str]] = []
    for size in sizes:
        points = random_trace(size, rng)
        bounds = compute_bounds(points)
        target_hz = points[len(points) // 2].frequency
        operations: dict[str, Callable[[], object]] = {
            "compute_bounds": lambda: compute_bounds(points),
            "compute_noise_floor": lambda: compute_noise_floor(points),
            "build_coords": lambda: build_coords(points, 800, 400, bounds),
            "find_peaks": lambda: find_peaks(points, 3),
            "nearest_point": lambda: nearest_point(points, target_hz),
            "process_spectrum": lambda: process_spectrum(points, width=800, height=400, compute_coords=True),
        }
        for name, fn in operations.items():
            rows.append(
                {
                    "n_points": int(size),
                    "operation": name,
                    "mean_ms": time_call(fn, iterations=iterations, warmup=warmup),
                    "iterations": int(iterations),
                }
            )
    return pd.DataFrame(rows).sort_values(["n_points", "operation"], kind="stable").reset_index(drop=True)


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    table = benchmark_table(args.sizes, iterations=args.iterations, warmup=args.warmup, seed=args.seed)
    print(table.pivot(index="operation", columns="n_points", values="mean_ms").to_string(float_format="{:.4f}".format))
    if args.csv_out is not None:
        args.csv_out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.csv_out, index=False)
        print(f"Timing table CSV: {args.csv_out}")


if __name__ == "__main__":
    main()

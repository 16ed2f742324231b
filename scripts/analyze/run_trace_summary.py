#!/usr/bin/env python3
"""Generate a synthetic trace and print its bounds, noise floor and markers."""

from __future__ import annotations

import argparse
import logging

from nr5g_spectrum.analysis import find_markers, nearest_point, summarize_trace
from nr5g_spectrum.dataio import marker_to_record, point_to_record
from nr5g_spectrum.pipeline import process_spectrum
from nr5g_spectrum.sim import (
    DEFAULT_CENTER_FREQUENCY_GHZ,
    DEFAULT_NUM_POINTS,
    DEFAULT_SEED,
    DEFAULT_SPAN_GHZ,
    TraceConfig,
    generate_trace_from_config,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--center-ghz",
        type=float,
        default=DEFAULT_CENTER_FREQUENCY_GHZ,
        help="Sweep center frequency in GHz.",
    )
    parser.add_argument(
        "--span-ghz",
        type=float,
        default=DEFAULT_SPAN_GHZ,
        help="Sweep span in GHz.",
    )
    parser.add_argument(
        "--num-points",
        type=int,
        default=DEFAULT_NUM_POINTS,
        help="Number of trace samples (must be > 1).",
    )
    parser.add_argument(
        "--seed",
        type=lambda text: int(text, 0),
        default=DEFAULT_SEED,
        help="Generator seed (decimal or 0x-prefixed).",
    )
    parser.add_argument(
        "--markers",
        type=int,
        default=3,
        help="Number of peak markers to place.",
    )
    parser.add_argument(
        "--probe-ghz",
        type=float,
        default=None,
        help="If set, report the sample nearest to this frequency.",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=800,
        help="Canvas width in pixels for the coordinate buffer.",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=400,
        help="Canvas height in pixels for the coordinate buffer.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = TraceConfig(
        center_frequency_ghz=args.center_ghz,
        span_ghz=args.span_ghz,
        num_points=args.num_points,
        seed=args.seed,
    )
    points = generate_trace_from_config(config)
    summary = process_spectrum(points, width=args.width, height=args.height, compute_coords=True)
    memory = summarize_trace(
        points,
        label="synthetic",
        center_frequency_ghz=config.center_frequency_ghz,
        span_ghz=config.span_ghz,
    )

    bounds = summary.bounds
    print(f"Samples: {len(points)}")
    print(f"Frequency range: {bounds.freq_min / 1e9:.4f} - {bounds.freq_max / 1e9:.4f} GHz")
    print(f"Amplitude range: {bounds.amp_min:.2f} - {bounds.amp_max:.2f} dB")
    print(f"Noise floor: {summary.noise_floor:.1f} dB")
    print(f"Peak: {memory.peak_amplitude_dbm:.1f} dB at {memory.peak_frequency_hz / 1e9:.4f} GHz")
    print(f"Coordinate buffer: {summary.coords.size} floats for {summary.width}x{summary.height}")
    print("Markers:")
    for marker in find_markers(points, count=args.markers):
        record = marker_to_record(marker)
        print(f"  {record['label']}: {record['amplitude']:.2f} dB at {record['frequency'] / 1e9:.4f} GHz")
    if args.probe_ghz is not None:
        nearest = point_to_record(nearest_point(points, args.probe_ghz * 1e9))
        print(f"Nearest to {args.probe_ghz:.4f} GHz: {nearest}")


if __name__ == "__main__":
    main()

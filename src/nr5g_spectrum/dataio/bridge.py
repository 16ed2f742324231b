"""Record-level entry points for the analyzer front end.

Each function validates the shape of its arguments, converts wire records to
trace values, calls the numeric core and converts the result back.  Shape
problems raise :class:`~nr5g_spectrum.dataio.records.SpectrumInputError`
before any computation starts.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
import pandas as pd

from nr5g_spectrum.analysis import trace
from nr5g_spectrum.dataio.records import (
    SpectrumInputError,
    bounds_from_record,
    bounds_to_record,
    coerce_int,
    coords_to_buffer,
    point_to_record,
    points_from_records,
    points_to_records,
    require_number,
)
from nr5g_spectrum.pipeline.process import process_spectrum as _process_spectrum
from nr5g_spectrum.plotting.coords import build_coords as _build_coords
from nr5g_spectrum.sim.traces import generate_spectrum_trace as _generate_spectrum_trace

RecordsLike = pd.DataFrame | Sequence[Mapping[str, Any]]


def compute_bounds(points: RecordsLike) -> dict[str, float]:
    return bounds_to_record(trace.compute_bounds(points_from_records(points)))


def compute_noise_floor(points: RecordsLike) -> float:
    return trace.compute_noise_floor(points_from_records(points))


def build_coords(
        points: RecordsLike,
        width: int,
        height: int,
        bounds: Mapping[str, Any],
) -> np.ndarray:
    """Return the little-endian float32 coordinate buffer for ``points``.

    ``width`` and ``height`` are truncated to integers.
    """

    pixel_width = coerce_int(width, "width")
    pixel_height = coerce_int(height, "height")
    parsed_bounds = bounds_from_record(bounds)
    samples = points_from_records(points)
    return coords_to_buffer(_build_coords(samples, pixel_width, pixel_height, parsed_bounds))


def generate_spectrum_trace(
        center_freq_ghz: float,
        span_ghz: float,
        num_points: int,
        seed: int,
) -> list[dict[str, float]]:
    """Generate a synthetic trace as records.

    ``num_points`` is truncated to an integer and ``seed`` is reduced modulo
    ``2**32``.  A ``num_points`` of 1 or less raises ``ValueError``.
    """

    center = require_number(center_freq_ghz, "center_freq_ghz")
    span = require_number(span_ghz, "span_ghz")
    count = coerce_int(num_points, "num_points")
    seed_value = coerce_int(seed, "seed")
    return points_to_records(_generate_spectrum_trace(center, span, count, seed_value))


def find_peaks(points: RecordsLike, max_peaks: int) -> list[dict[str, float]]:
    limit = coerce_int(max_peaks, "max_peaks")
    return points_to_records(trace.find_peaks(points_from_records(points), limit))


def nearest_point(points: RecordsLike, frequency_hz: float) -> dict[str, float]:
    target = require_number(frequency_hz, "frequency_hz")
    return point_to_record(trace.nearest_point(points_from_records(points), target))


def process_spectrum(options: Mapping[str, Any]) -> dict[str, Any]:
    """Run the composite bounds/noise-floor/coordinates operation.

    ``options`` holds ``points`` (required), ``width``, ``height`` and
    ``computeCoords``.  The result always carries ``bounds`` and
    ``noiseFloor``; ``coords``, ``width`` and ``height`` are added when
    ``computeCoords`` is truthy and both ``width`` and ``height`` are
    given and not None.
    """

    if not isinstance(options, Mapping):
        raise SpectrumInputError("Expected an options mapping.")
    if "points" not in options:
        raise SpectrumInputError("options is missing required key 'points'.")

    width = options.get("width")
    height = options.get("height")
    compute_coords = bool(options.get("computeCoords", False))
    if compute_coords and width is not None and height is not None:
        width = coerce_int(width, "width")
        height = coerce_int(height, "height")
    else:
        compute_coords = False

    summary = _process_spectrum(
        points_from_records(options["points"]),
        width=width,
        height=height,
        compute_coords=compute_coords,
    )
    result: dict[str, Any] = {
        "bounds": bounds_to_record(summary.bounds),
        "noiseFloor": summary.noise_floor,
    }
    if summary.has_coords:
        result["coords"] = coords_to_buffer(summary.coords)
        result["width"] = summary.width
        result["height"] = summary.height
    return result


__all__ = [
    "build_coords",
    "compute_bounds",
    "compute_noise_floor",
    "find_peaks",
    "generate_spectrum_trace",
    "nearest_point",
    "process_spectrum",
]

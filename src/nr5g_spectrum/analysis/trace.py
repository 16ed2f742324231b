"""Summary statistics and sample lookup for spectrum-analyzer traces.

A trace is an ordered sequence of :class:`SpectrumPoint` samples
(frequency in Hz, amplitude in dB-like units).  Every function here is pure:
inputs are read, never mutated, and a fresh value is returned.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from nr5g_spectrum.utils.validation import point_columns

DEFAULT_FREQ_RANGE_HZ: tuple[float, float] = (0.0, 1.0)
DEFAULT_AMP_RANGE_DB: tuple[float, float] = (-200.0, 0.0)
EMPTY_NOISE_FLOOR_DB = -200.0
NOISE_FLOOR_FRACTION = 0.2
NOISE_FLOOR_MIN_SAMPLES = 5


@dataclass(frozen=True)
class SpectrumPoint:
    """One trace sample."""

    frequency: float
    amplitude: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned envelope of a trace in (frequency, amplitude) space."""

    freq_min: float
    freq_max: float
    amp_min: float
    amp_max: float


EMPTY_POINT = SpectrumPoint(frequency=0.0, amplitude=-200.0)
DEFAULT_BOUNDS = Bounds(
    freq_min=DEFAULT_FREQ_RANGE_HZ[0],
    freq_max=DEFAULT_FREQ_RANGE_HZ[1],
    amp_min=DEFAULT_AMP_RANGE_DB[0],
    amp_max=DEFAULT_AMP_RANGE_DB[1],
)


def compute_bounds(points: Sequence[SpectrumPoint]) -> Bounds:
    """Return the min/max frequency and amplitude envelope of ``points``.

    Parameters
    ----------
    points : sequence of SpectrumPoint
        Trace samples in any order.

    Returns
    -------
    Bounds
        True min/max per axis.  An empty trace yields
        ``Bounds(0, 1, -200, 0)``.  NaN samples are ignored; an axis whose
        extrema are not finite (all-NaN or ±inf) falls back to its default
        pair independently of the other axis.
    """

    if len(points) == 0:
        return DEFAULT_BOUNDS

    frequency, amplitude = point_columns(points)
    freq_min, freq_max = _finite_extent(frequency, DEFAULT_FREQ_RANGE_HZ)
    amp_min, amp_max = _finite_extent(amplitude, DEFAULT_AMP_RANGE_DB)
    return Bounds(freq_min=freq_min, freq_max=freq_max, amp_min=amp_min, amp_max=amp_max)


def compute_noise_floor(points: Sequence[SpectrumPoint]) -> float:
    """Estimate the noise floor as the mean of the lowest-amplitude tail.

    The lowest ``max(5, round(0.2 * n))`` amplitudes (capped at ``n``) are
    averaged and the result is rounded to the nearest tenth.  Non-finite
    amplitudes are left out; a trace with no finite amplitude returns
    ``-200.0``.
    """

    if len(points) == 0:
        return EMPTY_NOISE_FLOOR_DB

    _, amplitude = point_columns(points)
    finite = amplitude[np.isfinite(amplitude)]
    if finite.size == 0:
        return EMPTY_NOISE_FLOOR_DB
    ordered = np.sort(finite)
    n = ordered.size
    sample_size = max(NOISE_FLOOR_MIN_SAMPLES, int(round_half_away(n * NOISE_FLOOR_FRACTION)))
    sample_size = min(sample_size, n)

    noise = float(np.sum(ordered[:sample_size])) / sample_size
    return round_half_away(noise, decimals=1)


def find_peaks(points: Sequence[SpectrumPoint], max_peaks: int) -> list[SpectrumPoint]:
    """Return the ``max_peaks`` highest-amplitude samples, highest first.

    Equal amplitudes keep their original trace order.  NaN amplitudes sort
    after every real value.
    """

    if len(points) == 0 or max_peaks <= 0:
        return []

    _, amplitude = point_columns(points)
    order = np.argsort(-amplitude, kind="stable")
    return [points[int(index)] for index in order[: int(max_peaks)]]


def nearest_point(points: Sequence[SpectrumPoint], frequency_hz: float) -> SpectrumPoint:
    """Return the sample whose frequency is closest to ``frequency_hz``.

    Ties resolve to the earliest sample.  An empty trace returns
    ``SpectrumPoint(0.0, -200.0)``.
    """

    if len(points) == 0:
        return EMPTY_POINT

    frequency, _ = point_columns(points)
    distance = np.abs(frequency - float(frequency_hz))
    distance[np.isnan(distance)] = np.inf
    return points[int(np.argmin(distance))]


def round_half_away(value: float, decimals: int = 0) -> float:
    """Round ``value`` to ``decimals`` places, halves away from zero."""

    scale = 10.0 ** decimals
    return float(np.copysign(np.floor(abs(value) * scale + 0.5), value) / scale)


def _finite_extent(values: np.ndarray, fallback: tuple[float, float]) -> tuple[float, float]:
    present = values[~np.isnan(values)]
    if present.size == 0:
        return fallback
    low = float(np.min(present))
    high = float(np.max(present))
    if not (np.isfinite(low) and np.isfinite(high)):
        return fallback
    return low, high


__all__ = [
    "Bounds",
    "DEFAULT_BOUNDS",
    "EMPTY_NOISE_FLOOR_DB",
    "EMPTY_POINT",
    "SpectrumPoint",
    "compute_bounds",
    "compute_noise_floor",
    "find_peaks",
    "nearest_point",
    "round_half_away",
]

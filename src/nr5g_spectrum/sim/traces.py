"""Synthetic spectrum-analyzer traces for tests and demonstrations."""

from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np

from nr5g_spectrum.analysis.trace import SpectrumPoint

logger = logging.getLogger(__name__)

DEFAULT_CENTER_FREQUENCY_GHZ = 28.0
DEFAULT_SPAN_GHZ = 6.0
DEFAULT_NUM_POINTS = 256
DEFAULT_SEED = 0x9E3779B9

BASELINE_DB = -120.0
NOISE_PEAK_TO_PEAK_DB = 4.0

_LCG_MULTIPLIER = 1664525
_LCG_INCREMENT = 1013904223
_UINT32_MASK = 0xFFFFFFFF
_UINT32_RANGE = float(2 ** 32)


class SeededRandom:
    """32-bit linear-congruential generator.

    ``state' = (1664525 * state + 1013904223) mod 2**32``; each draw is
    ``state' / 2**32`` in ``[0, 1)``.  One instance belongs to one trace
    generation; nothing is shared between instances.
    """

    def __init__(self, seed: int) -> None:
        self._state = int(seed) & _UINT32_MASK

    @property
    def state(self) -> int:
        return self._state

    def random(self) -> float:
        self._state = (_LCG_MULTIPLIER * self._state + _LCG_INCREMENT) & _UINT32_MASK
        return self._state / _UINT32_RANGE

    def uniform_array(self, size: int) -> np.ndarray:
        """Draw ``size`` consecutive values as a float64 array."""

        return np.fromiter((self.random() for _ in range(size)), dtype=np.float64, count=size)


@dataclass(frozen=True)
class TraceConfig:
    """Sweep settings for a synthetic trace."""

    center_frequency_ghz: float = DEFAULT_CENTER_FREQUENCY_GHZ
    span_ghz: float = DEFAULT_SPAN_GHZ
    num_points: int = DEFAULT_NUM_POINTS
    seed: int | None = None


def generate_spectrum_trace(
        center_freq_ghz: float,
        span_ghz: float,
        num_points: int,
        seed: int,
) -> list[SpectrumPoint]:
    """Build a reproducible synthetic trace.

    The amplitude model is uniform noise around -120 dB plus three Gaussian
    terms: a wide one at the trace midpoint and two narrow spurs at 30% and
    70% of the index range.

    Parameters
    ----------
    center_freq_ghz : float
        Sweep center in GHz.
    span_ghz : float
        Sweep width in GHz.  Frequencies ascend when positive.
    num_points : int
        Number of samples, must be greater than 1.
    seed : int
        Generator seed, reduced modulo ``2**32``.

    Returns
    -------
    list of SpectrumPoint
        ``num_points`` samples, frequencies in Hz.

    Raises
    ------
    ValueError
        If *num_points* is 1 or less.
    """

    n = int(num_points)
    if n <= 1:
        raise ValueError("num_points must be greater than 1.")

    rng = SeededRandom(seed)
    start_ghz = float(center_freq_ghz) - float(span_ghz) / 2.0
    step_ghz = float(span_ghz) / (n - 1)

    index = np.arange(n)
    frequency_hz = (start_ghz + step_ghz * index) * 1e9
    noise = BASELINE_DB + (rng.uniform_array(n) * NOISE_PEAK_TO_PEAK_DB - NOISE_PEAK_TO_PEAK_DB / 2.0)

    # Midpoint offset uses floor division on the index count.
    t_signal = (index - n // 2).astype(np.float64) / (n / 10.0)
    t_spur1 = (index - n * 0.3) / (n / 25.0)
    t_spur2 = (index - n * 0.7) / (n / 28.0)

    signal_peak = -20.0 * np.exp(-t_signal * t_signal) + 5.0
    spur1 = -45.0 * np.exp(-t_spur1 * t_spur1)
    spur2 = -52.0 * np.exp(-t_spur2 * t_spur2)
    amplitude = noise + signal_peak + spur1 + spur2

    return [
        SpectrumPoint(frequency=float(freq), amplitude=float(amp))
        for freq, amp in zip(frequency_hz, amplitude)
    ]


def generate_trace_from_config(
        config: TraceConfig,
        *,
        rng: np.random.Generator | int | None = None,
) -> list[SpectrumPoint]:
    """Generate a trace from ``config``, drawing a seed when none is set."""

    seed = config.seed
    if seed is None:
        seed = int(_resolve_rng(rng).integers(0, 2 ** 32))
        logger.debug("Drew trace seed %#010x", seed)
    return generate_spectrum_trace(
        config.center_frequency_ghz,
        config.span_ghz,
        config.num_points,
        seed,
    )


def _resolve_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


__all__ = [
    "DEFAULT_CENTER_FREQUENCY_GHZ",
    "DEFAULT_NUM_POINTS",
    "DEFAULT_SEED",
    "DEFAULT_SPAN_GHZ",
    "SeededRandom",
    "TraceConfig",
    "generate_spectrum_trace",
    "generate_trace_from_config",
]

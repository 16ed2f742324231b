"""Unit tests for sim.traces."""

from __future__ import annotations

import math

import numpy as np
import pytest

from nr5g_spectrum.sim.traces import (
    SeededRandom,
    TraceConfig,
    generate_spectrum_trace,
    generate_trace_from_config,
)


def test_seeded_random_follows_lcg_recurrence() -> None:
    rng = SeededRandom(0)
    first = rng.random()
    assert first == 1013904223 / 2**32
    expected_state = (1664525 * 1013904223 + 1013904223) % 2**32
    assert rng.random() == expected_state / 2**32
    assert rng.state == expected_state


def test_seeded_random_reduces_seed_modulo_2_32() -> None:
    assert SeededRandom(2**32 + 7).random() == SeededRandom(7).random()
    assert SeededRandom(-1).state == 0xFFFFFFFF


def test_seeded_random_stays_in_unit_interval() -> None:
    values = SeededRandom(12345).uniform_array(5000)
    assert values.shape == (5000,)
    assert np.all(values >= 0.0)
    assert np.all(values < 1.0)


def test_generate_spectrum_trace_is_deterministic() -> None:
    first = generate_spectrum_trace(28.0, 6.0, 256, 0x9E3779B9)
    second = generate_spectrum_trace(28.0, 6.0, 256, 0x9E3779B9)
    assert first == second


def test_generate_spectrum_trace_differs_between_seeds() -> None:
    first = generate_spectrum_trace(28.0, 6.0, 64, 111)
    second = generate_spectrum_trace(28.0, 6.0, 64, 222)
    assert [point.amplitude for point in first] != [point.amplitude for point in second]


def test_generate_spectrum_trace_frequency_axis() -> None:
    trace = generate_spectrum_trace(28.0, 6.0, 256, 1)
    frequency = np.array([point.frequency for point in trace])

    assert frequency.size == 256
    assert np.all(np.diff(frequency) > 0.0)
    assert np.isclose(frequency[0], 25e9)
    assert np.isclose(frequency[-1], 31e9)


def test_generate_spectrum_trace_matches_signal_model() -> None:
    n = 11
    seed = 42
    trace = generate_spectrum_trace(3.5, 0.1, n, seed)
    rng = SeededRandom(seed)
    for index, point in enumerate(trace):
        noise = -120.0 + (rng.random() * 4.0 - 2.0)
        t1 = (index - n // 2) / (n / 10.0)
        t2 = (index - n * 0.3) / (n / 25.0)
        t3 = (index - n * 0.7) / (n / 28.0)
        expected = (
            noise
            + (-20.0 * math.exp(-t1 * t1) + 5.0)
            - 45.0 * math.exp(-t2 * t2)
            - 52.0 * math.exp(-t3 * t3)
        )
        assert np.isclose(point.amplitude, expected, rtol=0.0, atol=1e-9)


def test_generate_spectrum_trace_amplitude_envelope() -> None:
    n = 256
    trace = generate_spectrum_trace(28.0, 6.0, n, 7)
    amplitude = np.array([point.amplitude for point in trace])

    # Far from every Gaussian term the level is baseline + 5 with +-2 noise.
    assert -117.0 <= amplitude[0] <= -113.0
    # The midpoint term pulls the center down by about 20 dB.
    assert amplitude[n // 2] < amplitude[0] - 15.0
    # Both spurs sit below the surrounding trace.
    assert amplitude[int(n * 0.3)] < -150.0
    assert amplitude[int(n * 0.7)] < -150.0


@pytest.mark.parametrize("num_points", [1, 0, -5])
def test_generate_spectrum_trace_rejects_short_traces(num_points: int) -> None:
    with pytest.raises(ValueError, match="num_points must be greater than 1"):
        generate_spectrum_trace(28.0, 6.0, num_points, 0)


def test_generate_trace_from_config_uses_explicit_seed() -> None:
    config = TraceConfig(center_frequency_ghz=24.0, span_ghz=4.0, num_points=32, seed=333)
    assert generate_trace_from_config(config) == generate_spectrum_trace(24.0, 4.0, 32, 333)


def test_generate_trace_from_config_draws_seed_from_rng() -> None:
    config = TraceConfig(num_points=16)
    first = generate_trace_from_config(config, rng=np.random.default_rng(3))
    second = generate_trace_from_config(config, rng=np.random.default_rng(3))
    assert first == second
    assert len(first) == 16

"""Input validation helpers shared across the package."""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Real
from typing import Any

import numpy as np


def as_float_column(values: Any, name: str) -> np.ndarray:
    """Return a validated 1D float64 array (empty input is allowed)."""

    array = np.asarray(values, dtype=np.float64)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1D array.")
    return array


def point_columns(points: Sequence[Any]) -> tuple[np.ndarray, np.ndarray]:
    """Split a sequence of spectrum points into ``(frequency, amplitude)`` columns."""

    count = len(points)
    frequency = np.fromiter((point.frequency for point in points), dtype=np.float64, count=count)
    amplitude = np.fromiter((point.amplitude for point in points), dtype=np.float64, count=count)
    return frequency, amplitude


def is_real_number(value: Any) -> bool:
    """True for real numbers, excluding ``bool``."""

    return isinstance(value, (Real, np.integer, np.floating)) and not isinstance(value, (bool, np.bool_))


__all__ = ["as_float_column", "is_real_number", "point_columns"]

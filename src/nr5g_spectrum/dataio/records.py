"""Conversions between wire records and trace value types.

Wire records are plain mappings with the keys used by the analyzer front end:
``{"frequency", "amplitude"}`` for samples and
``{"freqMin", "freqMax", "ampMin", "ampMax"}`` for bounds.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import logging
from typing import Any

import numpy as np
import pandas as pd

from nr5g_spectrum.analysis.markers import Marker
from nr5g_spectrum.analysis.trace import Bounds, SpectrumPoint
from nr5g_spectrum.plotting.coords import COORD_DTYPE
from nr5g_spectrum.utils.validation import as_float_column, is_real_number

logger = logging.getLogger(__name__)

POINT_COLUMNS: tuple[str, ...] = ("frequency", "amplitude")
BOUNDS_KEYS: tuple[str, ...] = ("freqMin", "freqMax", "ampMin", "ampMax")


class SpectrumInputError(TypeError):
    """Raised when boundary input has the wrong type or shape."""


def points_from_records(
        records: pd.DataFrame | Sequence[Mapping[str, Any]],
        *,
        name: str = "points",
) -> list[SpectrumPoint]:
    """Convert a record sequence (or DataFrame) into spectrum points.

    Entries that are not mappings are skipped.  Missing or non-numeric
    ``frequency``/``amplitude`` values become NaN.

    Raises
    ------
    SpectrumInputError
        If *records* is not a sequence, or is a DataFrame without both
        point columns.
    """

    if isinstance(records, pd.DataFrame):
        return _points_from_frame(records, name=name)
    if isinstance(records, (str, bytes, bytearray, Mapping)) or not isinstance(records, Sequence):
        raise SpectrumInputError(f"Expected a sequence of spectrum points for {name!r}.")

    points: list[SpectrumPoint] = []
    skipped = 0
    for record in records:
        if not isinstance(record, Mapping):
            skipped += 1
            continue
        points.append(
            SpectrumPoint(
                frequency=coerce_float(record.get("frequency")),
                amplitude=coerce_float(record.get("amplitude")),
            )
        )
    if skipped:
        logger.debug("Skipped %d non-record entries in %s", skipped, name)
    return points


def points_to_records(points: Sequence[SpectrumPoint]) -> list[dict[str, float]]:
    return [point_to_record(point) for point in points]


def point_to_record(point: SpectrumPoint) -> dict[str, float]:
    return {"frequency": float(point.frequency), "amplitude": float(point.amplitude)}


def points_to_frame(points: Sequence[SpectrumPoint]) -> pd.DataFrame:
    """Return a two-column ``frequency``/``amplitude`` DataFrame."""

    return pd.DataFrame(
        {
            "frequency": [float(point.frequency) for point in points],
            "amplitude": [float(point.amplitude) for point in points],
        },
        columns=list(POINT_COLUMNS),
    )


def bounds_from_record(record: Mapping[str, Any]) -> Bounds:
    """Build :class:`Bounds` from a ``freqMin``/``freqMax``/``ampMin``/``ampMax`` mapping."""

    if not isinstance(record, Mapping):
        raise SpectrumInputError("Expected a bounds mapping.")
    missing = [key for key in BOUNDS_KEYS if key not in record]
    if missing:
        raise SpectrumInputError(f"Bounds are missing required keys: {missing}.")
    return Bounds(
        freq_min=coerce_float(record["freqMin"]),
        freq_max=coerce_float(record["freqMax"]),
        amp_min=coerce_float(record["ampMin"]),
        amp_max=coerce_float(record["ampMax"]),
    )


def bounds_to_record(bounds: Bounds) -> dict[str, float]:
    return {
        "freqMin": float(bounds.freq_min),
        "freqMax": float(bounds.freq_max),
        "ampMin": float(bounds.amp_min),
        "ampMax": float(bounds.amp_max),
    }


def marker_to_record(marker: Marker) -> dict[str, Any]:
    return {
        "frequency": float(marker.frequency),
        "amplitude": float(marker.amplitude),
        "label": marker.label,
    }


def coords_to_buffer(coords: np.ndarray) -> np.ndarray:
    """Return ``coords`` as a contiguous little-endian float32 array."""

    return np.ascontiguousarray(coords, dtype=COORD_DTYPE)


def coords_to_bytes(coords: np.ndarray) -> bytes:
    return coords_to_buffer(coords).tobytes()


def coerce_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")


def require_number(value: Any, name: str) -> float:
    """Return ``value`` as float, raising :class:`SpectrumInputError` for non-numbers."""

    if not is_real_number(value):
        raise SpectrumInputError(f"{name} must be a number, got {type(value).__name__}.")
    return float(value)


def coerce_int(value: Any, name: str) -> int:
    """Truncate a numeric argument to int; NaN and ±inf become 0.

    Raises :class:`SpectrumInputError` for non-numbers.
    """

    number = require_number(value, name)
    if not np.isfinite(number):
        return 0
    return int(number)


def _points_from_frame(frame: pd.DataFrame, *, name: str) -> list[SpectrumPoint]:
    missing = [column for column in POINT_COLUMNS if column not in frame.columns]
    if missing:
        raise SpectrumInputError(f"{name} DataFrame is missing required columns: {missing}.")
    frequency = as_float_column(pd.to_numeric(frame["frequency"], errors="coerce"), "frequency")
    amplitude = as_float_column(pd.to_numeric(frame["amplitude"], errors="coerce"), "amplitude")
    return [
        SpectrumPoint(frequency=float(freq), amplitude=float(amp))
        for freq, amp in zip(frequency, amplitude)
    ]


__all__ = [
    "BOUNDS_KEYS",
    "POINT_COLUMNS",
    "SpectrumInputError",
    "bounds_from_record",
    "bounds_to_record",
    "coerce_float",
    "coerce_int",
    "coords_to_buffer",
    "coords_to_bytes",
    "marker_to_record",
    "point_to_record",
    "points_from_records",
    "points_to_frame",
    "points_to_records",
    "require_number",
]

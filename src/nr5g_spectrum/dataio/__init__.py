"""Boundary adapters between wire records and the numeric core."""

from nr5g_spectrum.dataio import bridge
from nr5g_spectrum.dataio.records import (
    BOUNDS_KEYS,
    POINT_COLUMNS,
    SpectrumInputError,
    bounds_from_record,
    bounds_to_record,
    coerce_float,
    coerce_int,
    coords_to_buffer,
    coords_to_bytes,
    marker_to_record,
    point_to_record,
    points_from_records,
    points_to_frame,
    points_to_records,
    require_number,
)

__all__ = [
    "BOUNDS_KEYS",
    "POINT_COLUMNS",
    "SpectrumInputError",
    "bounds_from_record",
    "bounds_to_record",
    "bridge",
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

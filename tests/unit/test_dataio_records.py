"""Unit tests for dataio.records."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest

from nr5g_spectrum.analysis.markers import Marker
from nr5g_spectrum.analysis.trace import Bounds, SpectrumPoint
from nr5g_spectrum.dataio.records import (
    SpectrumInputError,
    bounds_from_record,
    bounds_to_record,
    coerce_int,
    coords_to_bytes,
    marker_to_record,
    points_from_records,
    points_to_frame,
    points_to_records,
    require_number,
)


def test_points_from_records_reads_wire_records() -> None:
    records = [{"frequency": 1e9, "amplitude": -80}, {"frequency": "2e9", "amplitude": -10.5}]
    assert points_from_records(records) == [SpectrumPoint(1e9, -80.0), SpectrumPoint(2e9, -10.5)]


def test_points_from_records_skips_non_mapping_entries() -> None:
    records = [{"frequency": 1.0, "amplitude": 2.0}, 5, None, ("x", "y")]
    assert points_from_records(records) == [SpectrumPoint(1.0, 2.0)]


def test_points_from_records_missing_fields_become_nan() -> None:
    (point,) = points_from_records([{"frequency": 1.0}])
    assert point.frequency == 1.0
    assert math.isnan(point.amplitude)


@pytest.mark.parametrize("records", ["points", b"raw", {"frequency": 1.0}, 42, None])
def test_points_from_records_rejects_non_sequences(records: object) -> None:
    with pytest.raises(SpectrumInputError, match="Expected a sequence"):
        points_from_records(records)


def test_spectrum_input_error_is_a_type_error() -> None:
    assert issubclass(SpectrumInputError, TypeError)


def test_points_from_records_accepts_dataframe() -> None:
    frame = pd.DataFrame({"frequency": [1e9, 2e9], "amplitude": [-80.0, None], "label": ["a", "b"]})
    points = points_from_records(frame)
    assert points[0] == SpectrumPoint(1e9, -80.0)
    assert math.isnan(points[1].amplitude)


def test_points_from_records_rejects_dataframe_without_columns() -> None:
    with pytest.raises(SpectrumInputError, match="missing required columns"):
        points_from_records(pd.DataFrame({"frequency": [1.0]}))


def test_points_to_frame_round_trips_through_records() -> None:
    points = [SpectrumPoint(1e9, -80.0), SpectrumPoint(2e9, -10.0)]
    frame = points_to_frame(points)
    assert list(frame.columns) == ["frequency", "amplitude"]
    assert points_from_records(frame) == points
    assert points_to_records(points) == frame.to_dict(orient="records")


def test_bounds_record_keys() -> None:
    record = bounds_to_record(Bounds(1.0, 2.0, -3.0, 4.0))
    assert record == {"freqMin": 1.0, "freqMax": 2.0, "ampMin": -3.0, "ampMax": 4.0}
    assert bounds_from_record(record) == Bounds(1.0, 2.0, -3.0, 4.0)


def test_bounds_from_record_rejects_missing_keys() -> None:
    with pytest.raises(SpectrumInputError, match="missing required keys"):
        bounds_from_record({"freqMin": 0.0, "freqMax": 1.0})
    with pytest.raises(SpectrumInputError, match="Expected a bounds mapping"):
        bounds_from_record([0.0, 1.0, -200.0, 0.0])


def test_marker_to_record_includes_label() -> None:
    assert marker_to_record(Marker(1e9, -10.0, "M1")) == {"frequency": 1e9, "amplitude": -10.0, "label": "M1"}


def test_coords_to_bytes_is_little_endian_float32() -> None:
    raw = coords_to_bytes(np.array([1.0, -2.5], dtype=np.float64))
    assert len(raw) == 8
    assert np.frombuffer(raw, dtype="<f4").tolist() == [1.0, -2.5]


def test_require_number_rejects_non_numbers() -> None:
    assert require_number(3, "width") == 3.0
    with pytest.raises(SpectrumInputError, match="width must be a number"):
        require_number("800", "width")


def test_coerce_int_truncates_and_zeroes_non_finite() -> None:
    assert coerce_int(799.9, "width") == 799
    assert coerce_int(-3.7, "width") == -3
    assert coerce_int(float("nan"), "width") == 0
    assert coerce_int(float("inf"), "width") == 0
    with pytest.raises(SpectrumInputError, match="seed must be a number"):
        coerce_int(None, "seed")

"""Trace markers and captured-trace summaries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import datetime, timezone
import re

from nr5g_spectrum.analysis.trace import (
    EMPTY_NOISE_FLOOR_DB,
    SpectrumPoint,
    compute_noise_floor,
    find_peaks,
    nearest_point,
    round_half_away,
)

DEFAULT_MARKER_COUNT = 3
_MARKER_LABEL_PATTERN = re.compile(r"^M(\d+)$")


@dataclass(frozen=True)
class Marker:
    """A labelled sample pinned on a trace."""

    frequency: float
    amplitude: float
    label: str


@dataclass(frozen=True)
class TraceSummary:
    """Headline numbers of a captured trace."""

    label: str
    peak_frequency_hz: float
    peak_amplitude_dbm: float
    noise_floor_dbm: float
    reference_level_dbm: float
    span_ghz: float
    path_mode: str
    captured_at: datetime


def find_markers(points: Sequence[SpectrumPoint], *, count: int = DEFAULT_MARKER_COUNT) -> tuple[Marker, ...]:
    """Label the ``count`` highest samples ``M1``, ``M2``, ... in descending order."""

    if count < 0:
        raise ValueError("count must be non-negative.")
    peaks = find_peaks(points, count)
    return tuple(
        Marker(frequency=peak.frequency, amplitude=peak.amplitude, label=f"M{index + 1}")
        for index, peak in enumerate(peaks)
    )


def next_marker_label(markers: Sequence[Marker]) -> str:
    """Return the first unused ``M<n>`` label after the highest existing one."""

    highest = 0
    for marker in markers:
        match = _MARKER_LABEL_PATTERN.match(marker.label)
        if match is not None:
            highest = max(highest, int(match.group(1)))
    return f"M{highest + 1}"


def place_marker(
        points: Sequence[SpectrumPoint],
        markers: Sequence[Marker],
        frequency_hz: float,
) -> tuple[Marker, ...]:
    """Add a marker on the sample nearest to ``frequency_hz``."""

    if len(points) == 0:
        return tuple(markers)
    nearest = nearest_point(points, frequency_hz)
    marker = Marker(
        frequency=nearest.frequency,
        amplitude=nearest.amplitude,
        label=next_marker_label(markers),
    )
    return (*markers, marker)


def move_marker(
        points: Sequence[SpectrumPoint],
        markers: Sequence[Marker],
        label: str,
        frequency_hz: float,
) -> tuple[Marker, ...]:
    """Re-snap the marker named ``label`` to the sample nearest ``frequency_hz``.

    Markers with other labels are returned untouched.  An unknown label or an
    empty trace leaves the markers as they were.
    """

    if len(points) == 0:
        return tuple(markers)
    nearest = nearest_point(points, frequency_hz)
    return tuple(
        replace(marker, frequency=nearest.frequency, amplitude=nearest.amplitude)
        if marker.label == label
        else marker
        for marker in markers
    )


def delete_marker(markers: Sequence[Marker], label: str) -> tuple[Marker, ...]:
    return tuple(marker for marker in markers if marker.label != label)


def summarize_trace(
        points: Sequence[SpectrumPoint],
        *,
        label: str,
        center_frequency_ghz: float,
        span_ghz: float,
        reference_level_dbm: float = 0.0,
        path_mode: str = "1RF",
        captured_at: datetime | None = None,
) -> TraceSummary:
    """Reduce a trace to its peak and noise floor for side-by-side comparison.

    An empty trace reports the center frequency as its peak frequency and
    ``-200`` for both levels.
    """

    timestamp = captured_at if captured_at is not None else datetime.now(timezone.utc)
    if len(points) == 0:
        return TraceSummary(
            label=label,
            peak_frequency_hz=float(center_frequency_ghz) * 1e9,
            peak_amplitude_dbm=EMPTY_NOISE_FLOOR_DB,
            noise_floor_dbm=EMPTY_NOISE_FLOOR_DB,
            reference_level_dbm=float(reference_level_dbm),
            span_ghz=float(span_ghz),
            path_mode=path_mode,
            captured_at=timestamp,
        )

    peak = find_peaks(points, 1)[0]
    return TraceSummary(
        label=label,
        peak_frequency_hz=float(peak.frequency),
        peak_amplitude_dbm=round_half_away(float(peak.amplitude), decimals=1),
        noise_floor_dbm=compute_noise_floor(points),
        reference_level_dbm=float(reference_level_dbm),
        span_ghz=float(span_ghz),
        path_mode=path_mode,
        captured_at=timestamp,
    )


__all__ = [
    "DEFAULT_MARKER_COUNT",
    "Marker",
    "TraceSummary",
    "delete_marker",
    "find_markers",
    "move_marker",
    "next_marker_label",
    "place_marker",
    "summarize_trace",
]

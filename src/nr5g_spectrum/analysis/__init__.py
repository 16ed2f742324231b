from nr5g_spectrum.analysis.markers import (
    DEFAULT_MARKER_COUNT,
    Marker,
    TraceSummary,
    delete_marker,
    find_markers,
    move_marker,
    next_marker_label,
    place_marker,
    summarize_trace,
)
from nr5g_spectrum.analysis.trace import (
    DEFAULT_BOUNDS,
    EMPTY_NOISE_FLOOR_DB,
    EMPTY_POINT,
    Bounds,
    SpectrumPoint,
    compute_bounds,
    compute_noise_floor,
    find_peaks,
    nearest_point,
    round_half_away,
)

__all__ = [
    "Bounds",
    "DEFAULT_BOUNDS",
    "DEFAULT_MARKER_COUNT",
    "EMPTY_NOISE_FLOOR_DB",
    "EMPTY_POINT",
    "Marker",
    "SpectrumPoint",
    "TraceSummary",
    "compute_bounds",
    "compute_noise_floor",
    "delete_marker",
    "find_markers",
    "find_peaks",
    "move_marker",
    "nearest_point",
    "next_marker_label",
    "place_marker",
    "round_half_away",
    "summarize_trace",
]

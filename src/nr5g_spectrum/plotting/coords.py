"""Screen-space coordinate preparation for trace rendering."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from nr5g_spectrum.analysis.trace import Bounds, SpectrumPoint
from nr5g_spectrum.utils.validation import point_columns

COORD_DTYPE = np.dtype("<f4")


def build_coords(
        points: Sequence[SpectrumPoint],
        width: int,
        height: int,
        bounds: Bounds,
) -> np.ndarray:
    """Map samples into interleaved ``(x, y)`` pixel coordinates.

    ``x`` grows with frequency across ``[0, width]``; ``y`` is inverted so the
    highest amplitude lands at row 0.  A non-positive (or NaN) span on either axis is
    replaced by 1.0.  Samples outside ``bounds`` map outside the canvas and
    are not clamped, so narrower bounds act as a zoom.

    Returns
    -------
    ndarray
        Contiguous little-endian float32 array of length ``2 * len(points)``.
    """

    freq_span = bounds.freq_max - bounds.freq_min
    amp_span = bounds.amp_max - bounds.amp_min
    if not freq_span > 0.0:
        freq_span = 1.0
    if not amp_span > 0.0:
        amp_span = 1.0

    coords = np.empty(2 * len(points), dtype=COORD_DTYPE)
    if len(points) == 0:
        return coords

    frequency, amplitude = point_columns(points)
    coords[0::2] = ((frequency - bounds.freq_min) / freq_span) * width
    coords[1::2] = height - ((amplitude - bounds.amp_min) / amp_span) * height
    return coords


__all__ = ["COORD_DTYPE", "build_coords"]

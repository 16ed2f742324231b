"""One-call trace processing: bounds, noise floor and optional coordinates."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from nr5g_spectrum.analysis.trace import Bounds, SpectrumPoint, compute_bounds, compute_noise_floor
from nr5g_spectrum.plotting.coords import build_coords


@dataclass(frozen=True)
class SpectrumSummary:
    """Result of :func:`process_spectrum`.

    ``coords``, ``width`` and ``height`` are set only when coordinates were
    requested with both dimensions.
    """

    bounds: Bounds
    noise_floor: float
    coords: np.ndarray | None = None
    width: int | None = None
    height: int | None = None

    @property
    def has_coords(self) -> bool:
        return self.coords is not None


def process_spectrum(
        points: Sequence[SpectrumPoint],
        *,
        width: int | None = None,
        height: int | None = None,
        compute_coords: bool = False,
) -> SpectrumSummary:
    """Compute bounds and noise floor, then coordinates against those bounds.

    Coordinates are built only when ``compute_coords`` is true and both
    ``width`` and ``height`` are given.
    """

    bounds = compute_bounds(points)
    noise_floor = compute_noise_floor(points)
    if not (compute_coords and width is not None and height is not None):
        return SpectrumSummary(bounds=bounds, noise_floor=noise_floor)

    coords = build_coords(points, int(width), int(height), bounds)
    return SpectrumSummary(
        bounds=bounds,
        noise_floor=noise_floor,
        coords=coords,
        width=int(width),
        height=int(height),
    )


__all__ = ["SpectrumSummary", "process_spectrum"]

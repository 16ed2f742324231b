from nr5g_spectrum.plotting.coords import COORD_DTYPE, build_coords

__all__ = ["COORD_DTYPE", "build_coords"]

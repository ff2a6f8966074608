"""Great-circle distance on a spherical earth."""

from __future__ import annotations

from typing import Union

import numpy as np

EARTH_RADIUS = 6_371_010.0

ArrayLike = Union[float, np.ndarray]

_RADIUS = np.float32(EARTH_RADIUS)


def haversine(lat1: ArrayLike, lon1: ArrayLike, lat2: ArrayLike, lon2: ArrayLike) -> np.ndarray:
    """Return the haversine distance in meters between two (sets of) points.

    Inputs are degrees and may be scalars or numpy arrays; they are broadcast
    against each other and evaluated in single precision. Degenerate input
    yields NaN rather than a warning.
    """
    with np.errstate(invalid="ignore", over="ignore"):
        lat1 = np.radians(np.asarray(lat1, dtype=np.float32))
        lon1 = np.radians(np.asarray(lon1, dtype=np.float32))
        lat2 = np.radians(np.asarray(lat2, dtype=np.float32))
        lon2 = np.radians(np.asarray(lon2, dtype=np.float32))

        half_d_lat = (lat2 - lat1) / np.float32(2)
        half_d_lon = (lon2 - lon1) / np.float32(2)

        a = np.sin(half_d_lat) * np.sin(half_d_lat) + np.cos(lat1) * np.cos(lat2) * np.sin(
            half_d_lon
        ) * np.sin(half_d_lon)
        c = np.float32(2) * np.arctan2(np.sqrt(a), np.sqrt(np.float32(1) - a))
        return _RADIUS * c

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .distance import haversine


def _to_single(value: float) -> float:
    # Out-of-range values become inf, as a float32 parse would.
    with np.errstate(over="ignore"):
        return float(np.float32(value))


@dataclass(frozen=True)
class Location:
    """A point in degrees, stored with single precision."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", _to_single(self.latitude))
        object.__setattr__(self, "longitude", _to_single(self.longitude))

    def distance(self, other: Location) -> float:
        """Return the great-circle distance to ``other`` in meters."""
        return float(haversine(self.latitude, self.longitude, other.latitude, other.longitude))


@dataclass(frozen=True)
class UserLocation:
    """A measured position and the radius (meters) it is accurate to."""

    location: Location
    accuracy: float = 1.0

    def with_accuracy(self, accuracy: float) -> UserLocation:
        return UserLocation(location=self.location, accuracy=accuracy)


@dataclass(frozen=True)
class Address:
    """An entry of the address table."""

    location: Location
    prefecture: str
    municipality: str
    town: str

    @property
    def full_name(self) -> str:
        return f"{self.prefecture}{self.municipality}{self.town}"


@dataclass(frozen=True)
class Config:
    # Claimed accuracies worse than this are treated as this value.
    max_accuracy: float = 100.0
    # Addresses at or beyond this distance are never returned.
    max_distance: float = 1000.0

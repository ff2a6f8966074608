import math
import warnings

import numpy as np
import pytest

from reverse_geocoder.components import Location
from reverse_geocoder.distance import EARTH_RADIUS, haversine

TOKYO = Location(latitude=35.681236, longitude=139.767125)
SHINAGAWA = Location(latitude=35.628471, longitude=139.738760)


def test_tokyo_to_shinagawa():
    assert TOKYO.distance(SHINAGAWA) == pytest.approx(6402.453, abs=1e-3)


def test_distance_to_self_is_zero():
    assert TOKYO.distance(TOKYO) == pytest.approx(0.0, abs=1e-3)


def test_distance_is_symmetric():
    assert TOKYO.distance(SHINAGAWA) == SHINAGAWA.distance(TOKYO)


def test_one_degree_of_latitude():
    origin = Location(latitude=0.0, longitude=0.0)
    north = Location(latitude=1.0, longitude=0.0)
    assert origin.distance(north) == pytest.approx(EARTH_RADIUS * math.pi / 180, rel=1e-5)


def test_haversine_broadcasts_over_arrays():
    latitudes = np.array([TOKYO.latitude, SHINAGAWA.latitude], dtype=np.float32)
    longitudes = np.array([TOKYO.longitude, SHINAGAWA.longitude], dtype=np.float32)

    distances = haversine(latitudes, longitudes, TOKYO.latitude, TOKYO.longitude)

    assert distances.dtype == np.float32
    assert distances[0] == pytest.approx(0.0, abs=1e-3)
    assert distances[1] == pytest.approx(TOKYO.distance(SHINAGAWA))


def test_nan_coordinates_give_nan_distance():
    assert math.isnan(Location(latitude=float("nan"), longitude=0.0).distance(TOKYO))


def test_location_is_stored_with_single_precision():
    location = Location(latitude=0.1, longitude=0.2)
    assert location.latitude == float(np.float32(0.1))
    assert location.longitude == float(np.float32(0.2))


def test_non_finite_coordinates_do_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        distances = haversine(np.array([np.inf, np.nan, 35.0]), np.zeros(3), np.inf, 0.0)
        far = Location(latitude=1e39, longitude=-1e39)

    assert np.isnan(distances).all()
    assert far.latitude == math.inf
    assert far.longitude == -math.inf

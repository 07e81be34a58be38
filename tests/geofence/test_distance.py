import math

import pytest

from src.hr_portal.hr_portal.geofence.distance import haversine_distance


def test_same_point_is_zero():
    assert haversine_distance(0, 0, 0, 0) == 0


@pytest.mark.parametrize(
    "a, b",
    [
        ((40.7128, -74.0060), (40.7589, -73.9851)),
        ((-33.8688, 151.2093), (51.5074, -0.1278)),
        ((0.0, 179.9), (0.0, -179.9)),
    ],
)
def test_distance_is_symmetric(a, b):
    assert haversine_distance(*a, *b) == pytest.approx(haversine_distance(*b, *a))


def test_one_degree_of_longitude_on_equator():
    assert haversine_distance(0, 0, 0, 1) == pytest.approx(111194.93, abs=0.01)


def test_short_north_offset():
    assert haversine_distance(10.0, 20.0, 10.0010792, 20.0) == pytest.approx(120.0, abs=0.01)


def test_antimeridian_is_short_way_round():
    assert haversine_distance(0.0, 179.9, 0.0, -179.9) == pytest.approx(2 * 11119.49, abs=0.1)


@pytest.mark.parametrize(
    "lat, lon",
    [
        (66.16849958870057, -92.19208432063249),
        (0.0, 0.0),
        (90.0, 0.0),
        (-45.5, 179.999),
    ],
)
def test_antipodal_points_do_not_raise(lat, lon):
    other_lon = lon + 180 if lon <= 0 else lon - 180

    distance = haversine_distance(lat, lon, -lat, other_lon)

    assert distance == pytest.approx(math.pi * 6_371_000, rel=1e-6)
    assert distance == pytest.approx(haversine_distance(-lat, other_lon, lat, lon))

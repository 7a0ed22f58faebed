import pytest

from src.storefront.models.domain import Coordinate
from src.storefront.services.geospatial import distance_km, effective_radius_km, haversine_km

NEW_YORK = Coordinate(40.7128, -74.0060)
LOS_ANGELES = Coordinate(34.0522, -118.2437)
SAMPLE_POINTS = [
    NEW_YORK,
    LOS_ANGELES,
    Coordinate(0.0, 0.0),
    Coordinate(89.9, 179.9),
    Coordinate(-33.8688, 151.2093),
    Coordinate(51.5074, -0.1278),
]


@pytest.mark.parametrize("point", SAMPLE_POINTS)
def test_distance_to_self_is_zero(point: Coordinate):
    assert distance_km(point, point) == pytest.approx(0.0, abs=0.01)


def test_distance_is_symmetric():
    for a in SAMPLE_POINTS:
        for b in SAMPLE_POINTS:
            assert distance_km(a, b) == pytest.approx(distance_km(b, a), abs=1e-9)


def test_new_york_to_los_angeles_matches_published_distance():
    assert distance_km(NEW_YORK, LOS_ANGELES) == pytest.approx(3936, rel=0.01)


def test_antipodal_points_do_not_fail():
    distance = haversine_km(0.0, 0.0, 0.0, 180.0)
    assert distance == pytest.approx(20015.1, rel=0.001)


def test_effective_radius_uses_smaller_bound():
    assert effective_radius_km(25, 10) == 10
    assert effective_radius_km(10, 50) == 10


@pytest.mark.parametrize("lat, lon", [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.5), (0.0, -181.0)])
def test_coordinate_rejects_out_of_range_values(lat: float, lon: float):
    with pytest.raises(ValueError):
        Coordinate(lat, lon)

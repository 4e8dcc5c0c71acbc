"""Tests for radius-bounded nearest-neighbour search."""

import pytest

from src.modules.geo.distance import distance_m
from src.modules.geo.models import Coordinate
from src.modules.geo.nearby import find_nearby
from tests.factories import PricePointFactory

ORIGIN = Coordinate(11.8636, -15.5977)


def at(id, dlat):
    return PricePointFactory(
        id=id, coordinate=Coordinate(ORIGIN.latitude + dlat, ORIGIN.longitude)
    )


@pytest.fixture
def points():
    # ~5.6 km, ~1.1 km, ~22 km, ~3.3 km north of the origin
    return [at(1, 0.05), at(2, 0.01), at(3, 0.2), at(4, 0.03)]


def test_sorted_ascending_within_radius(points):
    result = find_nearby(ORIGIN, points, radius_km=10, max_results=20)

    assert [n.point.id for n in result] == [2, 4, 1]
    distances = [n.distance_km for n in result]
    assert distances == sorted(distances)


def test_truncated_to_max_results(points):
    result = find_nearby(ORIGIN, points, radius_km=50, max_results=2)

    assert [n.point.id for n in result] == [2, 4]


def test_distance_in_km_to_three_places(points):
    (nearest,) = find_nearby(ORIGIN, points, radius_km=10, max_results=1)

    expected = round(distance_m(ORIGIN, points[1].coordinate) / 1000, 3)
    assert nearest.distance_km == expected


def test_radius_boundary():
    target = at(1, 0.01)
    exact_km = distance_m(ORIGIN, target.coordinate) / 1000

    assert len(find_nearby(ORIGIN, [target], exact_km + 1e-6, 5)) == 1
    assert find_nearby(ORIGIN, [target], exact_km - 1e-6, 5) == []


def test_points_without_gps_skipped(points):
    no_gps = PricePointFactory(id=99, coordinate=None)

    result = find_nearby(ORIGIN, [no_gps, *points], radius_km=10, max_results=20)

    assert 99 not in [n.point.id for n in result]


def test_zero_max_results(points):
    assert find_nearby(ORIGIN, points, radius_km=10, max_results=0) == []


def test_origin_itself_at_zero_distance():
    (hit,) = find_nearby(ORIGIN, [PricePointFactory(id=7, coordinate=ORIGIN)], 0, 1)
    assert hit.distance_km == 0.0


@pytest.mark.parametrize("radius_km, max_results", [(-1, 5), (5, -1)])
def test_negative_arguments_rejected(points, radius_km, max_results):
    with pytest.raises(ValueError):
        find_nearby(ORIGIN, points, radius_km, max_results)

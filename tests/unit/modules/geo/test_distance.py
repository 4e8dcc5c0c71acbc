"""Tests for great-circle distances."""

import math

import pytest

from src.modules.geo.distance import (
    display_km,
    display_m,
    distance_km,
    distance_m,
    haversine_m,
    mean_center,
)
from src.modules.geo.models import Coordinate

BISSAU = Coordinate(11.8636, -15.5977)
BAFATA = Coordinate(12.1667, -14.6619)
GABU = Coordinate(12.2833, -14.2222)


class TestHaversine:
    def test_same_point(self):
        assert distance_m(BISSAU, BISSAU) == 0.0

    def test_equal_but_distinct_instances(self):
        assert distance_m(Coordinate(11.5, -15.0), Coordinate(11.5, -15.0)) == 0.0

    def test_one_degree_of_latitude(self):
        expected = 6_371_000 * math.pi / 180
        assert haversine_m(0.0, 0.0, 1.0, 0.0) == pytest.approx(expected, rel=1e-9)

    def test_bissau_to_bafata(self):
        assert 100_000 < distance_m(BISSAU, BAFATA) < 110_000

    def test_symmetric(self):
        assert distance_m(BISSAU, GABU) == distance_m(GABU, BISSAU)

    def test_triangle_inequality(self):
        direct = distance_m(BISSAU, GABU)
        via = distance_m(BISSAU, BAFATA) + distance_m(BAFATA, GABU)
        assert direct <= via + 1e-6

    def test_km(self):
        assert distance_km(BISSAU, BAFATA) == pytest.approx(
            distance_m(BISSAU, BAFATA) / 1000
        )


class TestDisplayRounding:
    def test_metres_two_places(self):
        assert display_m(1234.5678) == 1234.57

    def test_kilometres_three_places(self):
        assert display_km(1.23456) == 1.235


class TestMeanCenter:
    def test_single(self):
        assert mean_center([BISSAU]) == BISSAU

    def test_arithmetic_mean(self):
        center = mean_center([Coordinate(11.0, -15.0), Coordinate(12.0, -14.0)])
        assert center.latitude == pytest.approx(11.5)
        assert center.longitude == pytest.approx(-14.5)

    def test_empty(self):
        with pytest.raises(ValueError):
            mean_center([])


class TestCoordinate:
    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            Coordinate(float("nan"), -15.0)

    def test_infinite_rejected(self):
        with pytest.raises(ValueError):
            Coordinate(11.0, float("inf"))

    def test_none_rejected(self):
        with pytest.raises(TypeError):
            Coordinate(None, -15.0)

    def test_origin_is_legal(self):
        assert Coordinate(0.0, 0.0).latitude == 0.0

"""Tests for density and pairwise distance."""

import math
from unittest.mock import patch

import pytest

from src.modules.geo.density import (
    KM_PER_DEGREE,
    analyze_density,
    average_pairwise_distance_m,
    bounding_extents,
    estimate_area_km2,
)
from src.modules.geo.distance import distance_m
from src.modules.geo.models import BoundingBox, Coordinate

A = Coordinate(11.0, -15.0)
B = Coordinate(11.1, -14.9)
C = Coordinate(11.05, -14.95)


def test_bounding_extents():
    box = bounding_extents([A, B, C])
    assert box == BoundingBox(11.0, 11.1, -15.0, -14.9)


def test_bounding_extents_empty():
    with pytest.raises(ValueError):
        bounding_extents([])


def test_area_flat_earth_approximation():
    box = BoundingBox(11.0, 11.1, -15.0, -14.9)
    expected = 0.1 * 0.1 * KM_PER_DEGREE**2 * math.cos(math.radians(11.0))
    assert estimate_area_km2(box) == pytest.approx(expected)


def test_single_point_has_zero_density():
    stats = analyze_density("BS", [A])

    assert stats.point_count == 1
    assert stats.area_km2 == 0.0
    assert stats.density_per_km2 == 0.0
    assert stats.average_pairwise_distance_m == 0.0


def test_collinear_points_have_zero_density():
    stats = analyze_density("BS", [A, Coordinate(11.2, -15.0)])

    assert stats.area_km2 == 0.0
    assert stats.density_per_km2 == 0.0
    assert stats.average_pairwise_distance_m > 0


def test_empty():
    stats = analyze_density("BS", [])

    assert stats.region_code == "BS"
    assert stats.point_count == 0
    assert stats.area_km2 == 0.0
    assert stats.density_per_km2 == 0.0


def test_three_points():
    stats = analyze_density("BS", [A, B, C])
    area = estimate_area_km2(BoundingBox(11.0, 11.1, -15.0, -14.9))

    assert stats.point_count == 3
    assert stats.area_km2 == pytest.approx(area, abs=1e-4)
    assert stats.density_per_km2 == pytest.approx(3 / area, abs=1e-4)
    expected_avg = (distance_m(A, B) + distance_m(A, C) + distance_m(B, C)) / 3
    assert stats.average_pairwise_distance_m == pytest.approx(expected_avg, abs=0.01)


def test_pairwise_mean_of_two():
    assert average_pairwise_distance_m([A, B]) == distance_m(A, B)


def test_pairwise_fewer_than_two():
    assert average_pairwise_distance_m([]) == 0.0
    assert average_pairwise_distance_m([A]) == 0.0


def test_large_input_logs_warning():
    with patch("src.modules.geo.density.logger") as logger:
        average_pairwise_distance_m([A, B, C], warn_threshold=2)
        average_pairwise_distance_m([A, B], warn_threshold=2)

    logger.warning.assert_called_once()
    assert logger.warning.call_args.kwargs["point_count"] == 3

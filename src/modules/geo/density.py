"""Point density and spread for a set of coordinates."""

import math
from collections.abc import Sequence

from src.modules.geo.distance import distance_m
from src.modules.geo.models import BoundingBox, Coordinate, DensityStats
from src.utils.logger import get_logger

logger = get_logger(__name__)

KM_PER_DEGREE = 111.32
DEFAULT_PAIRWISE_WARN_THRESHOLD = 5_000


def bounding_extents(coordinates: Sequence[Coordinate]) -> BoundingBox:
    if not coordinates:
        raise ValueError("bounding_extents() requires at least one coordinate")
    lats = [c.latitude for c in coordinates]
    lngs = [c.longitude for c in coordinates]
    return BoundingBox(min(lats), max(lats), min(lngs), max(lngs))


def estimate_area_km2(box: BoundingBox) -> float:
    """Flat-earth area of a lat/lng rectangle, scaled by cos(min latitude)."""
    return (
        (box.max_lat - box.min_lat)
        * (box.max_lng - box.min_lng)
        * KM_PER_DEGREE
        * KM_PER_DEGREE
        * math.cos(math.radians(box.min_lat))
    )


def average_pairwise_distance_m(
    coordinates: Sequence[Coordinate],
    warn_threshold: int = DEFAULT_PAIRWISE_WARN_THRESHOLD,
) -> float:
    """Mean of all n*(n-1)/2 pairwise distances; 0 for fewer than two points."""
    n = len(coordinates)
    if n < 2:
        return 0.0
    if n > warn_threshold:
        logger.warning(
            "Pairwise distance over a large point set",
            point_count=n,
            pairs=n * (n - 1) // 2,
        )

    total = 0.0
    for i in range(n):
        for j in range(i + 1, n):
            total += distance_m(coordinates[i], coordinates[j])
    return total / (n * (n - 1) / 2)


def analyze_density(
    region_code: str | None,
    coordinates: Sequence[Coordinate],
    warn_threshold: int = DEFAULT_PAIRWISE_WARN_THRESHOLD,
) -> DensityStats:
    """
    Density of points over their bounding rectangle.

    A degenerate rectangle (one point, or all points on a line) has zero
    area and reports a density of 0.
    """
    if not coordinates:
        return DensityStats(region_code, 0, 0.0, 0.0, 0.0)

    area = estimate_area_km2(bounding_extents(coordinates))
    density = len(coordinates) / area if area > 0 else 0.0

    return DensityStats(
        region_code=region_code,
        point_count=len(coordinates),
        area_km2=round(area, 4),
        density_per_km2=round(density, 4),
        average_pairwise_distance_m=round(
            average_pairwise_distance_m(coordinates, warn_threshold), 2
        ),
    )

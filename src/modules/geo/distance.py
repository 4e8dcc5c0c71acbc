"""Great-circle distances between coordinates."""

import math
from collections.abc import Sequence

from src.modules.geo.models import Coordinate

EARTH_RADIUS_M = 6_371_000.0


def haversine_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in metres."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat, dlng = math.radians(lat2 - lat1), math.radians(lng2 - lng1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_m(a: Coordinate, b: Coordinate) -> float:
    """Unrounded distance in metres; use this for threshold comparisons."""
    if a == b:
        return 0.0
    return haversine_m(a.latitude, a.longitude, b.latitude, b.longitude)


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return distance_m(a, b) / 1000


def display_m(meters: float) -> float:
    """Round a metre value for presentation (2 dp)."""
    return round(meters, 2)


def display_km(kilometers: float) -> float:
    """Round a kilometre value for presentation (3 dp)."""
    return round(kilometers, 3)


def mean_center(coordinates: Sequence[Coordinate]) -> Coordinate:
    """Arithmetic mean of latitudes and longitudes.

    Adequate for points a few tens of kilometres apart; not antimeridian-safe.
    """
    if not coordinates:
        raise ValueError("mean_center() requires at least one coordinate")
    n = len(coordinates)
    return Coordinate(
        sum(c.latitude for c in coordinates) / n,
        sum(c.longitude for c in coordinates) / n,
    )

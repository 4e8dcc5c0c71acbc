"""Radius-bounded nearest-neighbour search."""

from collections.abc import Iterable

from src.modules.geo.distance import display_km, distance_m
from src.modules.geo.models import Coordinate, NearbyPoint, PricePoint


def find_nearby(
    origin: Coordinate,
    points: Iterable[PricePoint],
    radius_km: float,
    max_results: int,
) -> list[NearbyPoint]:
    """
    Points within ``radius_km`` of ``origin``, closest first, at most
    ``max_results`` of them.

    Filtering and ordering use unrounded distances; the returned
    ``distance_km`` is rounded to 3 dp. Ties keep input order.
    """
    if radius_km < 0:
        raise ValueError(f"radius_km must be non-negative, got {radius_km}")
    if max_results < 0:
        raise ValueError(f"max_results must be non-negative, got {max_results}")

    radius_m = radius_km * 1000
    candidates = []
    for point in points:
        if point.coordinate is None:
            continue
        meters = distance_m(origin, point.coordinate)
        if meters <= radius_m:
            candidates.append((meters, point))

    candidates.sort(key=lambda pair: pair[0])
    return [
        NearbyPoint(point=point, distance_km=display_km(meters / 1000))
        for meters, point in candidates[:max_results]
    ]

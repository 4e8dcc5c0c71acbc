"""Geographic clustering of price points."""

from collections.abc import Iterable, Sequence
from typing import Protocol

from src.modules.geo.distance import distance_m, mean_center
from src.modules.geo.models import Cluster, Coordinate, PointId

DEFAULT_RADIUS_M = 1000.0
MIN_CLUSTER_SIZE = 2


class Locatable(Protocol):
    id: PointId
    coordinate: Coordinate | None


class _ClusterBuilder:
    """Mutable cluster; centre and radius follow every added member."""

    def __init__(self, point: Locatable):
        self.ids: list[PointId] = []
        self.coordinates: list[Coordinate] = []
        self.center = point.coordinate
        self.radius_m = 0.0
        self.add(point)

    def add(self, point: Locatable) -> None:
        self.ids.append(point.id)
        self.coordinates.append(point.coordinate)
        self.center = mean_center(self.coordinates)
        self.radius_m = max(distance_m(self.center, c) for c in self.coordinates)

    def freeze(self) -> Cluster:
        return Cluster(
            member_ids=frozenset(self.ids),
            center_lat=self.center.latitude,
            center_lng=self.center.longitude,
            radius_m=round(self.radius_m, 2),
        )


def _located(points: Iterable[Locatable]) -> list[Locatable]:
    return [p for p in points if p.coordinate is not None]


def _check_radius(radius_m: float) -> None:
    if radius_m < 0:
        raise ValueError(f"radius_m must be non-negative, got {radius_m}")


def cluster_points(
    points: Sequence[Locatable], radius_m: float = DEFAULT_RADIUS_M
) -> list[Cluster]:
    """
    Greedy single-link-from-seed clustering.

    Points are visited in input order. Each unassigned point seeds a new
    cluster and pulls in every later unassigned point within ``radius_m`` of
    the seed itself, not of the other members. Groups of one are dropped.
    Points without a coordinate are ignored.
    """
    _check_radius(radius_m)
    located = _located(points)
    assigned = [False] * len(located)
    clusters: list[Cluster] = []

    for i, seed in enumerate(located):
        if assigned[i]:
            continue
        assigned[i] = True
        builder = _ClusterBuilder(seed)

        for j in range(i + 1, len(located)):
            if assigned[j]:
                continue
            other = located[j]
            if distance_m(seed.coordinate, other.coordinate) <= radius_m:
                builder.add(other)
                assigned[j] = True

        if len(builder.ids) >= MIN_CLUSTER_SIZE:
            clusters.append(builder.freeze())

    return clusters


def cluster_points_connected(
    points: Sequence[Locatable], radius_m: float = DEFAULT_RADIUS_M
) -> list[Cluster]:
    """
    Transitive clustering: connected components of the graph linking any
    two points within ``radius_m``.

    Clusters come out in the order of their first member in the input.
    Groups of one are dropped.
    """
    _check_radius(radius_m)
    located = _located(points)
    parent = list(range(len(located)))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    for i in range(len(located)):
        for j in range(i + 1, len(located)):
            if distance_m(located[i].coordinate, located[j].coordinate) <= radius_m:
                ri, rj = find(i), find(j)
                if ri != rj:
                    parent[max(ri, rj)] = min(ri, rj)

    groups: dict[int, list[Locatable]] = {}
    for i, point in enumerate(located):
        groups.setdefault(find(i), []).append(point)

    clusters = []
    for members in groups.values():
        if len(members) < MIN_CLUSTER_SIZE:
            continue
        builder = _ClusterBuilder(members[0])
        for member in members[1:]:
            builder.add(member)
        clusters.append(builder.freeze())
    return clusters

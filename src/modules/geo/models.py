"""Value objects for GPS validation, geocoding and region analysis."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Union

PointId = Union[int, str]


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if self.latitude is None or self.longitude is None:
            raise TypeError("Coordinate requires both latitude and longitude")
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError(
                f"Coordinate components must be finite: "
                f"({self.latitude}, {self.longitude})"
            )


_EDGES = ("min_lat", "max_lat", "min_lng", "max_lng")


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned latitude/longitude rectangle, bounds inclusive."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def __post_init__(self) -> None:
        if self.min_lat > self.max_lat or self.min_lng > self.max_lng:
            raise ValueError(
                f"Inverted bounding box: lat [{self.min_lat}, {self.max_lat}], "
                f"lng [{self.min_lng}, {self.max_lng}]"
            )

    def contains(self, coordinate: Coordinate) -> bool:
        return (
            self.min_lat <= coordinate.latitude <= self.max_lat
            and self.min_lng <= coordinate.longitude <= self.max_lng
        )

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            (self.min_lat + self.max_lat) / 2, (self.min_lng + self.max_lng) / 2
        )


@dataclass(frozen=True)
class ImplausibleZone(BoundingBox):
    """A rectangle where a reading is geometrically valid but unlikely.

    Edges are inclusive except those named in ``open_edges`` (any of
    "min_lat", "max_lat", "min_lng", "max_lng"), which exclude points lying
    exactly on them.
    """

    reason: str = "Coordinates appear to be in an implausible area"
    open_edges: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        super().__post_init__()
        unknown = set(self.open_edges) - set(_EDGES)
        if unknown:
            raise ValueError(f"unknown zone edges: {', '.join(sorted(unknown))}")

    def contains(self, coordinate: Coordinate) -> bool:
        if not super().contains(coordinate):
            return False
        lat, lng = coordinate.latitude, coordinate.longitude
        on_edge = {
            "min_lat": lat == self.min_lat,
            "max_lat": lat == self.max_lat,
            "min_lng": lng == self.min_lng,
            "max_lng": lng == self.max_lng,
        }
        return not any(on_edge[edge] for edge in self.open_edges)


class AccuracyLevel(str, Enum):
    """GPS accuracy tiers, best first."""

    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"
    INVALID = "INVALID"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Plausibility:
    plausible: bool
    reason: str


@dataclass(frozen=True)
class RegionConsistency:
    consistent: bool
    reason: str
    distance_from_region_m: float | None = None
    region_center_lat: float | None = None
    region_center_lng: float | None = None


@dataclass
class ValidationResult:
    """Outcome of validating one coordinate.

    ``valid`` is False only when the coordinate falls outside the country
    bounds; every other problem lowers ``quality_score`` and adds a warning.
    """

    coordinate: Coordinate
    accuracy: float | None = None
    region_code: str | None = None
    valid: bool = False
    accuracy_level: AccuracyLevel | None = None
    region_consistency: RegionConsistency | None = None
    plausibility: Plausibility | None = None
    quality_score: float = 0.0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)


@dataclass(frozen=True)
class Region:
    """A region as known to the administrative directory."""

    code: str
    name: str | None = None
    centroid_lat: float | None = None
    centroid_lng: float | None = None
    active: bool = True

    @property
    def centroid(self) -> Coordinate | None:
        if self.centroid_lat is None or self.centroid_lng is None:
            return None
        return Coordinate(self.centroid_lat, self.centroid_lng)


@dataclass(frozen=True)
class PricePoint:
    """A price observation as seen by the spatial engine."""

    id: PointId
    recorded_date: date
    coordinate: Coordinate | None = None
    region_code: str | None = None

    @property
    def has_gps(self) -> bool:
        return self.coordinate is not None


@dataclass(frozen=True)
class GeocodingResult:
    """Reverse-geocoding outcome; ``success`` is False on failure or when disabled."""

    coordinate: Coordinate | None
    success: bool
    error_message: str | None = None
    disabled: bool = False
    display_name: str | None = None
    formatted_address: str | None = None
    country: str | None = None
    state: str | None = None
    county: str | None = None
    city: str | None = None
    town: str | None = None
    village: str | None = None
    hamlet: str | None = None
    suburb: str | None = None
    road: str | None = None
    house_number: str | None = None
    postcode: str | None = None
    place_type: str | None = None
    place_class: str | None = None
    importance: float | None = None

    @classmethod
    def failure(
        cls, coordinate: Coordinate | None, error_message: str
    ) -> GeocodingResult:
        return cls(coordinate=coordinate, success=False, error_message=error_message)

    @classmethod
    def disabled_result(cls, coordinate: Coordinate | None) -> GeocodingResult:
        return cls(
            coordinate=coordinate,
            success=False,
            error_message="Geocoding is disabled",
            disabled=True,
        )


@dataclass(frozen=True)
class Cluster:
    """A group of at least two nearby points, frozen once clustering completes."""

    member_ids: frozenset[PointId]
    center_lat: float
    center_lng: float
    radius_m: float
    address: GeocodingResult | None = None

    @property
    def size(self) -> int:
        return len(self.member_ids)


@dataclass(frozen=True)
class DensityStats:
    region_code: str | None
    point_count: int
    area_km2: float
    density_per_km2: float
    average_pairwise_distance_m: float


@dataclass(frozen=True)
class NearbyPoint:
    point: PricePoint
    distance_km: float


@dataclass
class RegionGpsAnalysis:
    """GPS coverage, quality and spatial distribution report for one region."""

    region_code: str
    from_date: date | None
    to_date: date | None
    total_points: int = 0
    points_with_gps: int = 0
    gps_coverage_percentage: float = 0.0
    geographic_center_lat: float | None = None
    geographic_center_lng: float | None = None
    min_latitude: float | None = None
    max_latitude: float | None = None
    min_longitude: float | None = None
    max_longitude: float | None = None
    max_distance_from_center_m: float | None = None
    clusters: list[Cluster] = field(default_factory=list)
    cluster_count: int = 0
    valid_gps_count: int = 0
    invalid_gps_count: int = 0
    gps_quality_percentage: float = 0.0
    average_quality_score: float | None = None
    average_distance_between_points_m: float | None = None
    density: DensityStats | None = None

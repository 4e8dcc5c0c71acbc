from dataclasses import replace
from datetime import date

from src.modules.geo.clustering import cluster_points, cluster_points_connected
from src.modules.geo.density import (
    analyze_density,
    average_pairwise_distance_m,
    bounding_extents,
)
from src.modules.geo.distance import display_m, distance_m, mean_center
from src.modules.geo.infrastructure.geocoding_client import GeocodingClient
from src.modules.geo.models import (
    Cluster,
    Coordinate,
    DensityStats,
    NearbyPoint,
    PricePoint,
    RegionGpsAnalysis,
)
from src.modules.geo.nearby import find_nearby
from src.modules.geo.ports import PricePointSource
from src.modules.geo.validation import CoordinateValidator
from src.utils.logger import get_logger
from src.utils.settings.geo import GeoValidationSettings

DEFAULT_NEARBY_RADIUS_KM = 10.0
DEFAULT_NEARBY_MAX_RESULTS = 20


def _percentage(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return round(part * 100 / whole, 2)


def _in_window(point: PricePoint, from_date: date | None, to_date: date | None) -> bool:
    if from_date is not None and point.recorded_date < from_date:
        return False
    if to_date is not None and point.recorded_date > to_date:
        return False
    return True


class RegionGpsAnalysisService:
    """
    Region-level GPS analytics over the price store.

    Read-only: points are loaded through the PricePointSource and never
    written back.
    """

    def __init__(
        self,
        validator: CoordinateValidator,
        point_source: PricePointSource,
        settings: GeoValidationSettings | None = None,
        geocoding_client: GeocodingClient | None = None,
    ):
        self.validator = validator
        self.point_source = point_source
        self.settings = settings or GeoValidationSettings()
        self.geocoding_client = geocoding_client
        self.logger = get_logger(self.__class__.__name__)

    async def _load(
        self, region_code: str | None, from_date: date | None, to_date: date | None
    ) -> list[PricePoint]:
        points = await self.point_source.find_points(region_code, from_date, to_date)
        return [p for p in points if _in_window(p, from_date, to_date)]

    def _cluster(self, points: list[PricePoint]) -> list[Cluster]:
        radius = self.settings.GEO_CLUSTER_RADIUS_M
        if self.settings.GEO_CLUSTER_MODE == "connected":
            return cluster_points_connected(points, radius)
        return cluster_points(points, radius)

    async def _with_addresses(self, clusters: list[Cluster]) -> list[Cluster]:
        if self.geocoding_client is None:
            return clusters
        enriched = []
        for cluster in clusters:
            address = await self.geocoding_client.reverse_geocode(
                Coordinate(cluster.center_lat, cluster.center_lng)
            )
            enriched.append(replace(cluster, address=address))
        return enriched

    async def analyze_region(
        self,
        region_code: str,
        from_date: date | None = None,
        to_date: date | None = None,
        enrich_addresses: bool = False,
    ) -> RegionGpsAnalysis:
        """
        Coverage, spatial spread, clusters, validity and density of the
        region's price points recorded between ``from_date`` and ``to_date``
        (both inclusive, either open).
        """
        points = await self._load(region_code, from_date, to_date)
        located = [p for p in points if p.has_gps]
        coordinates = [p.coordinate for p in located]

        analysis = RegionGpsAnalysis(
            region_code=region_code,
            from_date=from_date,
            to_date=to_date,
            total_points=len(points),
            points_with_gps=len(located),
            gps_coverage_percentage=_percentage(len(located), len(points)),
        )
        if not located:
            analysis.density = analyze_density(region_code, [])
            self.logger.debug(
                "Region has no GPS-bearing points",
                region_code=region_code,
                total_points=len(points),
            )
            return analysis

        center = mean_center(coordinates)
        extents = bounding_extents(coordinates)
        analysis.geographic_center_lat = center.latitude
        analysis.geographic_center_lng = center.longitude
        analysis.min_latitude = extents.min_lat
        analysis.max_latitude = extents.max_lat
        analysis.min_longitude = extents.min_lng
        analysis.max_longitude = extents.max_lng
        analysis.max_distance_from_center_m = display_m(
            max(distance_m(center, c) for c in coordinates)
        )

        clusters = self._cluster(located)
        if enrich_addresses:
            clusters = await self._with_addresses(clusters)
        analysis.clusters = clusters
        analysis.cluster_count = len(clusters)

        # stored points carry no accuracy and are scored without a region check
        scores = []
        for point in located:
            result = await self.validator.validate(point.coordinate)
            if result.valid:
                scores.append(result.quality_score)
        analysis.valid_gps_count = len(scores)
        analysis.invalid_gps_count = len(located) - len(scores)
        analysis.gps_quality_percentage = _percentage(len(scores), len(located))
        if scores:
            analysis.average_quality_score = round(sum(scores) / len(scores), 2)

        warn_threshold = self.settings.GEO_PAIRWISE_WARN_THRESHOLD
        analysis.average_distance_between_points_m = round(
            average_pairwise_distance_m(coordinates, warn_threshold), 2
        )
        analysis.density = analyze_density(region_code, coordinates, warn_threshold)

        self.logger.debug(
            "Region GPS analysis completed",
            region_code=region_code,
            total_points=analysis.total_points,
            points_with_gps=analysis.points_with_gps,
            cluster_count=analysis.cluster_count,
        )
        return analysis

    async def density_stats(
        self,
        region_code: str,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> DensityStats:
        points = await self._load(region_code, from_date, to_date)
        coordinates = [p.coordinate for p in points if p.has_gps]
        return analyze_density(
            region_code, coordinates, self.settings.GEO_PAIRWISE_WARN_THRESHOLD
        )

    async def find_nearby_points(
        self,
        latitude: float,
        longitude: float,
        radius_km: float = DEFAULT_NEARBY_RADIUS_KM,
        max_results: int = DEFAULT_NEARBY_MAX_RESULTS,
    ) -> list[NearbyPoint]:
        """Closest price points across all regions."""
        origin = Coordinate(latitude, longitude)
        points = await self.point_source.find_points(None)
        nearby = find_nearby(origin, points, radius_km, max_results)
        self.logger.debug(
            "Nearby search completed",
            radius_km=radius_km,
            candidates=len(points),
            found=len(nearby),
        )
        return nearby

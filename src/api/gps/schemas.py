"""GPS API schemas (requests and serializable views of the engine's records)."""

from datetime import date

from pydantic import BaseModel, Field

from src.api.core.messages import APIResponse
from src.modules.geo.models import (
    AccuracyLevel,
    Cluster,
    DensityStats,
    GeocodingResult,
    NearbyPoint,
    PointId,
    RegionConsistency,
    RegionGpsAnalysis,
    ValidationResult,
)


class Coordinates(BaseModel):
    """WGS84 coordinate in decimal degrees."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class GpsValidationRequest(Coordinates):
    accuracy: float | None = Field(
        default=None, description="Reported GPS accuracy radius in metres"
    )
    region_code: str | None = None


class PriceSubmissionGps(BaseModel):
    """GPS part of a price submission; both coordinates may be absent."""

    gps_lat: float | None = Field(default=None, ge=-90, le=90)
    gps_lng: float | None = Field(default=None, ge=-180, le=180)
    region_code: str | None = None


class RegionConsistencySchema(BaseModel):
    consistent: bool
    reason: str
    distance_from_region_m: float | None = None
    region_center_lat: float | None = None
    region_center_lng: float | None = None

    @classmethod
    def from_domain(cls, consistency: RegionConsistency) -> "RegionConsistencySchema":
        return cls(
            consistent=consistency.consistent,
            reason=consistency.reason,
            distance_from_region_m=consistency.distance_from_region_m,
            region_center_lat=consistency.region_center_lat,
            region_center_lng=consistency.region_center_lng,
        )


class PlausibilitySchema(BaseModel):
    plausible: bool
    reason: str


class ValidationResultSchema(BaseModel):
    latitude: float
    longitude: float
    accuracy: float | None
    region_code: str | None
    valid: bool
    accuracy_level: AccuracyLevel | None
    region_consistency: RegionConsistencySchema | None
    plausibility: PlausibilitySchema | None
    quality_score: float
    errors: list[str]
    warnings: list[str]

    @classmethod
    def from_domain(cls, result: ValidationResult) -> "ValidationResultSchema":
        return cls(
            latitude=result.coordinate.latitude,
            longitude=result.coordinate.longitude,
            accuracy=result.accuracy,
            region_code=result.region_code,
            valid=result.valid,
            accuracy_level=result.accuracy_level,
            region_consistency=(
                RegionConsistencySchema.from_domain(result.region_consistency)
                if result.region_consistency is not None
                else None
            ),
            plausibility=(
                PlausibilitySchema(
                    plausible=result.plausibility.plausible,
                    reason=result.plausibility.reason,
                )
                if result.plausibility is not None
                else None
            ),
            quality_score=result.quality_score,
            errors=list(result.errors),
            warnings=list(result.warnings),
        )


class GeocodingResultSchema(BaseModel):
    latitude: float | None
    longitude: float | None
    success: bool
    disabled: bool = False
    error_message: str | None = None
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
    def from_domain(cls, result: GeocodingResult) -> "GeocodingResultSchema":
        coordinate = result.coordinate
        return cls(
            latitude=coordinate.latitude if coordinate else None,
            longitude=coordinate.longitude if coordinate else None,
            success=result.success,
            disabled=result.disabled,
            error_message=result.error_message,
            display_name=result.display_name,
            formatted_address=result.formatted_address,
            country=result.country,
            state=result.state,
            county=result.county,
            city=result.city,
            town=result.town,
            village=result.village,
            hamlet=result.hamlet,
            suburb=result.suburb,
            road=result.road,
            house_number=result.house_number,
            postcode=result.postcode,
            place_type=result.place_type,
            place_class=result.place_class,
            importance=result.importance,
        )


class ClusterSchema(BaseModel):
    member_ids: list[PointId]
    size: int
    center_lat: float
    center_lng: float
    radius_m: float
    address: GeocodingResultSchema | None = None

    @classmethod
    def from_domain(cls, cluster: Cluster) -> "ClusterSchema":
        return cls(
            member_ids=sorted(cluster.member_ids, key=str),
            size=cluster.size,
            center_lat=cluster.center_lat,
            center_lng=cluster.center_lng,
            radius_m=cluster.radius_m,
            address=(
                GeocodingResultSchema.from_domain(cluster.address)
                if cluster.address is not None
                else None
            ),
        )


class DensityStatsSchema(BaseModel):
    region_code: str | None
    point_count: int
    area_km2: float
    density_per_km2: float
    average_pairwise_distance_m: float

    @classmethod
    def from_domain(cls, stats: DensityStats) -> "DensityStatsSchema":
        return cls(
            region_code=stats.region_code,
            point_count=stats.point_count,
            area_km2=stats.area_km2,
            density_per_km2=stats.density_per_km2,
            average_pairwise_distance_m=stats.average_pairwise_distance_m,
        )


class RegionGpsAnalysisSchema(BaseModel):
    region_code: str
    from_date: date | None
    to_date: date | None
    total_points: int
    points_with_gps: int
    gps_coverage_percentage: float
    geographic_center_lat: float | None
    geographic_center_lng: float | None
    min_latitude: float | None
    max_latitude: float | None
    min_longitude: float | None
    max_longitude: float | None
    max_distance_from_center_m: float | None
    clusters: list[ClusterSchema]
    cluster_count: int
    valid_gps_count: int
    invalid_gps_count: int
    gps_quality_percentage: float
    average_quality_score: float | None
    average_distance_between_points_m: float | None
    density: DensityStatsSchema | None

    @classmethod
    def from_domain(cls, analysis: RegionGpsAnalysis) -> "RegionGpsAnalysisSchema":
        return cls(
            region_code=analysis.region_code,
            from_date=analysis.from_date,
            to_date=analysis.to_date,
            total_points=analysis.total_points,
            points_with_gps=analysis.points_with_gps,
            gps_coverage_percentage=analysis.gps_coverage_percentage,
            geographic_center_lat=analysis.geographic_center_lat,
            geographic_center_lng=analysis.geographic_center_lng,
            min_latitude=analysis.min_latitude,
            max_latitude=analysis.max_latitude,
            min_longitude=analysis.min_longitude,
            max_longitude=analysis.max_longitude,
            max_distance_from_center_m=analysis.max_distance_from_center_m,
            clusters=[ClusterSchema.from_domain(c) for c in analysis.clusters],
            cluster_count=analysis.cluster_count,
            valid_gps_count=analysis.valid_gps_count,
            invalid_gps_count=analysis.invalid_gps_count,
            gps_quality_percentage=analysis.gps_quality_percentage,
            average_quality_score=analysis.average_quality_score,
            average_distance_between_points_m=analysis.average_distance_between_points_m,
            density=(
                DensityStatsSchema.from_domain(analysis.density)
                if analysis.density is not None
                else None
            ),
        )


class NearbyPointSchema(BaseModel):
    id: PointId
    region_code: str | None
    recorded_date: date
    latitude: float
    longitude: float
    distance_km: float

    @classmethod
    def from_domain(cls, nearby: NearbyPoint) -> "NearbyPointSchema":
        point = nearby.point
        return cls(
            id=point.id,
            region_code=point.region_code,
            recorded_date=point.recorded_date,
            latitude=point.coordinate.latitude,
            longitude=point.coordinate.longitude,
            distance_km=nearby.distance_km,
        )


class DistanceSchema(BaseModel):
    distance_m: float
    distance_km: float


class GeocodingCacheStats(BaseModel):
    size: int
    max_size: int
    enabled: bool


ValidationResponse = APIResponse[ValidationResultSchema]
PriceValidationResponse = APIResponse[ValidationResultSchema | None]
GeocodingResponse = APIResponse[GeocodingResultSchema]
RegionAnalysisResponse = APIResponse[RegionGpsAnalysisSchema]
DensityStatsResponse = APIResponse[DensityStatsSchema]
NearbyPointsResponse = APIResponse[list[NearbyPointSchema]]
DistanceResponse = APIResponse[DistanceSchema]
GeocodingCacheStatsResponse = APIResponse[GeocodingCacheStats]

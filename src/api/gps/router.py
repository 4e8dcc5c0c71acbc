from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query, status

from src.api.core.constants import (
    DEFAULT_NEARBY_MAX_RESULTS,
    DEFAULT_NEARBY_RADIUS_KM,
    MAX_NEARBY_MAX_RESULTS,
    MAX_NEARBY_RADIUS_KM,
)
from src.api.core.dependencies import (
    CoordinateValidatorDep,
    GeocodingClientDep,
    RegionAnalysisServiceDep,
)
from src.api.core.exceptions.base import PriceGeoException
from src.api.core.messages import APIResponse, MessageCode
from src.api.gps.schemas import (
    DensityStatsResponse,
    DensityStatsSchema,
    DistanceResponse,
    DistanceSchema,
    GeocodingCacheStats,
    GeocodingCacheStatsResponse,
    GeocodingResponse,
    GeocodingResultSchema,
    GpsValidationRequest,
    NearbyPointSchema,
    NearbyPointsResponse,
    PriceSubmissionGps,
    PriceValidationResponse,
    RegionAnalysisResponse,
    RegionGpsAnalysisSchema,
    ValidationResponse,
    ValidationResultSchema,
)
from src.modules.geo.distance import display_km, display_m, distance_m
from src.modules.geo.models import Coordinate

router = APIRouter(prefix="/gps", tags=["gps"])

Latitude = Annotated[float, Query(ge=-90, le=90)]
Longitude = Annotated[float, Query(ge=-180, le=180)]


def _check_window(from_date: date | None, to_date: date | None) -> None:
    if from_date is not None and to_date is not None and from_date > to_date:
        raise PriceGeoException(
            MessageCode.INVALID_INPUT,
            status.HTTP_400_BAD_REQUEST,
            details={"description": "from_date must not be after to_date"},
        )


@router.post("/validate", response_model=ValidationResponse)
async def validate_coordinates(
    body: GpsValidationRequest,
    validator: CoordinateValidatorDep,
) -> APIResponse[ValidationResultSchema]:
    result = await validator.validate(
        Coordinate(body.latitude, body.longitude), body.accuracy, body.region_code
    )
    return APIResponse.success(
        message_code=MessageCode.GPS_VALIDATED,
        data=ValidationResultSchema.from_domain(result),
    )


@router.post("/validate-price", response_model=PriceValidationResponse)
async def validate_price_submission(
    body: PriceSubmissionGps,
    validator: CoordinateValidatorDep,
) -> APIResponse[ValidationResultSchema | None]:
    result = await validator.validate_price_submission(
        body.gps_lat, body.gps_lng, body.region_code
    )
    if result is None:
        return APIResponse.success(message_code=MessageCode.GPS_NOT_PROVIDED)
    return APIResponse.success(
        message_code=MessageCode.GPS_VALIDATED,
        data=ValidationResultSchema.from_domain(result),
    )


@router.get("/geocode", response_model=GeocodingResponse)
async def reverse_geocode(
    geocoding_client: GeocodingClientDep,
    latitude: Latitude,
    longitude: Longitude,
) -> APIResponse[GeocodingResultSchema]:
    """Reverse-geocode a coordinate. Provider failures come back as data."""
    result = await geocoding_client.reverse_geocode(Coordinate(latitude, longitude))
    if result.disabled:
        message_code = MessageCode.GEOCODING_DISABLED
    elif result.success:
        message_code = MessageCode.GEOCODING_COMPLETED
    else:
        message_code = MessageCode.GEOCODING_FAILED
    return APIResponse.success(
        message_code=message_code,
        data=GeocodingResultSchema.from_domain(result),
    )


@router.get("/nearby", response_model=NearbyPointsResponse)
async def nearby_prices(
    service: RegionAnalysisServiceDep,
    latitude: Latitude,
    longitude: Longitude,
    radius_km: float = Query(
        default=DEFAULT_NEARBY_RADIUS_KM, ge=0, le=MAX_NEARBY_RADIUS_KM
    ),
    max_results: int = Query(
        default=DEFAULT_NEARBY_MAX_RESULTS, ge=1, le=MAX_NEARBY_MAX_RESULTS
    ),
) -> APIResponse[list[NearbyPointSchema]]:
    nearby = await service.find_nearby_points(
        latitude, longitude, radius_km, max_results
    )
    return APIResponse.success(data=[NearbyPointSchema.from_domain(n) for n in nearby])


@router.get("/analyze-region", response_model=RegionAnalysisResponse)
async def analyze_region(
    service: RegionAnalysisServiceDep,
    region_code: str = Query(min_length=1),
    from_date: date | None = None,
    to_date: date | None = None,
    enrich_addresses: bool = False,
) -> APIResponse[RegionGpsAnalysisSchema]:
    _check_window(from_date, to_date)
    analysis = await service.analyze_region(
        region_code, from_date, to_date, enrich_addresses=enrich_addresses
    )
    return APIResponse.success(
        message_code=MessageCode.REGION_ANALYZED,
        data=RegionGpsAnalysisSchema.from_domain(analysis),
    )


@router.get("/density-stats", response_model=DensityStatsResponse)
async def density_stats(
    service: RegionAnalysisServiceDep,
    region_code: str = Query(min_length=1),
    from_date: date | None = None,
    to_date: date | None = None,
) -> APIResponse[DensityStatsSchema]:
    _check_window(from_date, to_date)
    stats = await service.density_stats(region_code, from_date, to_date)
    return APIResponse.success(data=DensityStatsSchema.from_domain(stats))


@router.get("/geocoding-cache/stats", response_model=GeocodingCacheStatsResponse)
async def geocoding_cache_stats(
    geocoding_client: GeocodingClientDep,
) -> APIResponse[GeocodingCacheStats]:
    return APIResponse.success(
        data=GeocodingCacheStats(**geocoding_client.cache_stats())
    )


@router.post("/geocoding-cache/clear", response_model=GeocodingCacheStatsResponse)
async def clear_geocoding_cache(
    geocoding_client: GeocodingClientDep,
) -> APIResponse[GeocodingCacheStats]:
    geocoding_client.clear_cache()
    return APIResponse.success(
        message_code=MessageCode.GEOCODING_CACHE_CLEARED,
        data=GeocodingCacheStats(**geocoding_client.cache_stats()),
    )


@router.get("/distance", response_model=DistanceResponse)
async def distance_between(
    lat1: Latitude,
    lng1: Longitude,
    lat2: Latitude,
    lng2: Longitude,
) -> APIResponse[DistanceSchema]:
    meters = distance_m(Coordinate(lat1, lng1), Coordinate(lat2, lng2))
    return APIResponse.success(
        data=DistanceSchema(
            distance_m=display_m(meters), distance_km=display_km(meters / 1000)
        )
    )

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.modules.geo.application.use_cases import RegionGpsAnalysisService
from src.modules.geo.infrastructure.geocoding_client import GeocodingClient
from src.modules.geo.infrastructure.repositories import (
    SqlPricePointSource,
    SqlRegionDirectory,
)
from src.modules.geo.ports import PricePointSource, RegionDirectory
from src.modules.geo.validation import CoordinateValidator
from src.utils.settings.geo import GeoValidationSettings


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


def get_geo_settings(request: Request) -> GeoValidationSettings:
    return request.app.state.geo_settings


def get_geocoding_client(request: Request) -> GeocodingClient:
    """Process-wide geocoding client created in the app lifespan."""
    return request.app.state.geocoding_client


async def get_region_directory(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> RegionDirectory:
    return SqlRegionDirectory(db)


async def get_price_point_source(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> PricePointSource:
    return SqlPricePointSource(db)


async def get_coordinate_validator(
    settings: Annotated[GeoValidationSettings, Depends(get_geo_settings)],
    region_directory: Annotated[RegionDirectory, Depends(get_region_directory)],
) -> CoordinateValidator:
    """Get coordinate validator checking regions against the database."""
    return CoordinateValidator.from_settings(settings, region_directory)


async def get_region_analysis_service(
    validator: Annotated[CoordinateValidator, Depends(get_coordinate_validator)],
    point_source: Annotated[PricePointSource, Depends(get_price_point_source)],
    settings: Annotated[GeoValidationSettings, Depends(get_geo_settings)],
    geocoding_client: Annotated[GeocodingClient, Depends(get_geocoding_client)],
) -> RegionGpsAnalysisService:
    """Get region analysis service with database-backed collaborators."""
    return RegionGpsAnalysisService(
        validator, point_source, settings, geocoding_client
    )


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
GeocodingClientDep = Annotated[GeocodingClient, Depends(get_geocoding_client)]
CoordinateValidatorDep = Annotated[
    CoordinateValidator, Depends(get_coordinate_validator)
]
RegionAnalysisServiceDep = Annotated[
    RegionGpsAnalysisService, Depends(get_region_analysis_service)
]

"""Global test configuration and fixtures for the price GPS API."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.core.dependencies import (
    get_db_session,
    get_geocoding_client,
    get_price_point_source,
    get_region_directory,
)
from src.modules.geo.infrastructure.geocoding_client import GeocodingClient
from src.modules.geo.validation import CoordinateValidator
from src.utils.settings.geo import GeoValidationSettings
from src.utils.settings.geocoding import GeocodingSettings
from tests.factories import PricePointFactory, RegionFactory
from tests.fakes import InMemoryPricePointSource, InMemoryRegionDirectory


@pytest.fixture
def region_factory():
    return RegionFactory


@pytest.fixture
def price_point_factory():
    return PricePointFactory


@pytest.fixture
def geo_settings() -> GeoValidationSettings:
    return GeoValidationSettings()


@pytest.fixture
def geocoding_settings() -> GeocodingSettings:
    return GeocodingSettings(
        GEOCODING_ENABLED=True,
        GEOCODING_CACHE_ENABLED=True,
        GEOCODING_CACHE_CAPACITY=16,
    )


@pytest.fixture
def region_directory() -> InMemoryRegionDirectory:
    """Bissau region with its centroid on file."""
    return InMemoryRegionDirectory([RegionFactory(code="BS", name="Bissau")])


@pytest.fixture
def point_source() -> InMemoryPricePointSource:
    return InMemoryPricePointSource()


@pytest.fixture
def validator(geo_settings, region_directory) -> CoordinateValidator:
    return CoordinateValidator.from_settings(geo_settings, region_directory)


@pytest.fixture
def nominatim_payload() -> dict:
    """Trimmed Nominatim /reverse response for central Bissau."""
    return {
        "place_id": 123456,
        "display_name": "Avenida Amílcar Cabral, Bissau, Sector Autónomo de Bissau, Guiné-Bissau",
        "type": "residential",
        "class": "highway",
        "importance": 0.2,
        "address": {
            "road": "Avenida Amílcar Cabral",
            "city": "Bissau",
            "state": "Sector Autónomo de Bissau",
            "country": "Guiné-Bissau",
            "country_code": "gw",
        },
    }


@pytest.fixture
def geocoding_client(geocoding_settings, nominatim_payload) -> GeocodingClient:
    """Geocoding client whose provider call is an AsyncMock."""
    client = GeocodingClient(geocoding_settings)
    client._fetch = AsyncMock(return_value=nominatim_payload)
    return client


@pytest.fixture
def db_session() -> AsyncMock:
    """Session double answering the health probe."""
    session = AsyncMock()
    session.execute.return_value = MagicMock(scalar=MagicMock(return_value=1))
    return session


@pytest_asyncio.fixture
async def app(
    region_directory, point_source, geocoding_client, db_session
) -> AsyncGenerator[FastAPI, None]:
    """FastAPI application with in-memory collaborators and lifespan running."""
    from src.main import app

    async def _db_session():
        yield db_session

    app.dependency_overrides[get_db_session] = _db_session
    app.dependency_overrides[get_region_directory] = lambda: region_directory
    app.dependency_overrides[get_price_point_source] = lambda: point_source
    app.dependency_overrides[get_geocoding_client] = lambda: geocoding_client

    async with LifespanManager(app):
        yield app

    app.dependency_overrides.clear()


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing public endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test-pricegeo-api",
    ) as ac:
        yield ac

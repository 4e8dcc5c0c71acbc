import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.logging import logging_middleware
from src.api.router import api_router
from src.database.connection import AsyncSessionLocal, async_engine
from src.modules.geo.infrastructure.geocoding_client import GeocodingClient
from src.utils.settings.app import AppSettings
from src.utils.settings.geo import GeoValidationSettings
from src.utils.settings.geocoding import GeocodingSettings
from src.utils.logger import setup_logging


app_settings = AppSettings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    app_settings.validate_prod()
    logger = setup_logging(app_settings.is_production, app_settings.DEBUG)
    logger.info("Starting price GPS API...")

    app.state.session_factory = AsyncSessionLocal
    app.state.geo_settings = GeoValidationSettings()
    app.state.geocoding_client = GeocodingClient(GeocodingSettings())
    logger.info(
        "Geocoding client ready",
        **app.state.geocoding_client.cache_stats(),
    )

    yield

    # Shutdown
    app.state.geocoding_client.clear_cache()
    await async_engine.dispose()
    logger.info("Shutting down price GPS API...")


app = FastAPI(
    title="Price GPS API",
    description="GPS validation, reverse geocoding and spatial analysis of price observations",
    version=app_settings.API_VERSION,
    lifespan=lifespan,
    docs_url=None if app_settings.is_production else "/docs",
    redoc_url=None if app_settings.is_production else "/redoc",
    openapi_url=None if app_settings.is_production else "/openapi.json",
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)
app.middleware("http")(logging_middleware)

app.include_router(api_router)


def run_dev_server():
    """Run development server with auto-reload."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=True, access_log=False
    )


def run_prod_server():
    """Run production server."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=False, access_log=False
    )

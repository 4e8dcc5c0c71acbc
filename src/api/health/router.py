"""Health check endpoints for debugging and monitoring."""

from fastapi import APIRouter

from src.api.core.dependencies import AsyncSessionDep, GeocodingClientDep
from src.modules.health.service import HealthService, OverallHealthStatus

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check(
    db: AsyncSessionDep,
    geocoding_client: GeocodingClientDep,
) -> OverallHealthStatus:
    """Health of the database and the geocoding client, with cache stats."""
    health_service = HealthService(db, geocoding_client)
    return await health_service.run_all_checks()


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "pricegeo-api"}

from fastapi import APIRouter

from src.api.gps.router import router as gps_router
from src.api.health.router import router as health_router

# V1 API router
v1_router = APIRouter(prefix="/v1")
v1_router.include_router(gps_router)

# Main API router
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(v1_router)

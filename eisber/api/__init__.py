"""API routers for EisBER."""

from fastapi import APIRouter

from .detections import router as detections_router
from .health import router as health_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(detections_router)

__all__ = ["api_router"]

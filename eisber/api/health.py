"""Health check endpoint."""

from fastapi import APIRouter
from eisber.config import settings

router = APIRouter()


@router.get("/healthz", summary="Health check")
def health_check() -> dict[str, str]:
    return {"status": "ok", "env": settings.eisber_env}

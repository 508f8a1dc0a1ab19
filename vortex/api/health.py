"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from vortex import __version__
from vortex.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str
    environment: str
    platform: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report version, environment and which platform deployments go to."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.app_env,
        platform="vercel" if settings.vercel_deploy_real else "mock",
        timestamp=datetime.now(timezone.utc),
    )

"""Main API router."""

from fastapi import APIRouter

from vortex.api import deploy, health

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(deploy.router, prefix="/api", tags=["deploy"])

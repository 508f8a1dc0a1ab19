"""Dependency injection for API endpoints."""

from typing import Annotated

from fastapi import Depends

from vortex.config import Settings, get_settings
from vortex.core.gateway import DeploymentGateway
from vortex.core.handler import DeployRequestHandler
from vortex.platforms import DeploymentPlatform, MockPlatform, VercelPlatform
from vortex.utils.logging import get_logger

logger = get_logger(__name__)

SettingsDep = Annotated[Settings, Depends(get_settings)]


async def get_platform(settings: SettingsDep) -> DeploymentPlatform:
    """Build the platform client for this request from settings."""
    if settings.vercel_deploy_real:
        return VercelPlatform.from_settings(settings)
    logger.info(
        "mock_platform.enabled",
        reason="set VERCEL_DEPLOY_REAL=true in .env for real deployment",
    )
    return MockPlatform()


async def get_gateway(
    platform: Annotated[DeploymentPlatform, Depends(get_platform)],
) -> DeploymentGateway:
    return DeploymentGateway(platform)


async def get_deploy_handler(
    gateway: Annotated[DeploymentGateway, Depends(get_gateway)],
) -> DeployRequestHandler:
    return DeployRequestHandler(gateway)


# Type aliases for cleaner signatures
HandlerDep = Annotated[DeployRequestHandler, Depends(get_deploy_handler)]

"""Deployment platform clients."""

from vortex.platforms.base import (
    CreatedDeployment,
    DeploymentPlatform,
    EnvVarSpec,
    ProjectDomain,
)
from vortex.platforms.mock import MockPlatform
from vortex.platforms.vercel import VercelPlatform

__all__ = [
    "CreatedDeployment",
    "DeploymentPlatform",
    "EnvVarSpec",
    "MockPlatform",
    "ProjectDomain",
    "VercelPlatform",
]

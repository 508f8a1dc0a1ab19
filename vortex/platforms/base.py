"""Base class for deployment platform clients."""

from abc import ABC, abstractmethod
from typing import Literal

from pydantic import BaseModel, Field

from vortex.models.deployment import GitSource
from vortex.models.form import DeploymentTarget
from vortex.utils.logging import get_logger


class CreatedDeployment(BaseModel):
    """Deployment as the platform reports it right after creation."""

    id: str
    url: str = ""
    status: str = ""
    alias: list[str] = Field(default_factory=list)
    created_at: int | None = None
    ready: int | None = None
    inspector_url: str | None = None
    project_id: str | None = None


class ProjectDomain(BaseModel):
    """A domain attached to a project."""

    name: str
    verified: bool = False

    @property
    def status(self) -> str:
        return "verified" if self.verified else "pending verification"


class EnvVarSpec(BaseModel):
    """An environment variable to store on a project."""

    key: str
    value: str
    type: Literal["plain", "encrypted", "sensitive"] = "plain"
    target: list[DeploymentTarget | Literal["development"]] = Field(
        default_factory=lambda: ["production"]
    )


class DeploymentPlatform(ABC):
    """A hosting platform that builds git repositories.

    Implementations raise ``PlatformError`` for every failed call, carrying
    the HTTP status and platform error code when one was returned.
    """

    def __init__(self):
        self.logger = get_logger(f"platform.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Platform identifier."""
        pass

    @abstractmethod
    async def create_deployment(
        self,
        *,
        name: str,
        target: DeploymentTarget,
        git_source: GitSource,
        alias: list[str] | None = None,
    ) -> CreatedDeployment:
        """Start a deployment of ``git_source`` under project ``name``."""
        pass

    @abstractmethod
    async def add_project_domain(self, project: str, domain: str) -> ProjectDomain:
        """Attach ``domain`` to ``project``."""
        pass

    @abstractmethod
    async def upsert_env_vars(
        self, project: str, env_vars: list[EnvVarSpec]
    ) -> list[str]:
        """Create or overwrite ``env_vars`` on ``project`` in one batch.

        Returns:
            Keys of the variables that were stored.
        """
        pass

"""In-process platform for demos without a Vercel account."""

import asyncio
import time
import uuid

from vortex.models.deployment import GitSource
from vortex.models.form import DeploymentTarget
from vortex.platforms.base import (
    CreatedDeployment,
    DeploymentPlatform,
    EnvVarSpec,
    ProjectDomain,
)


class MockPlatform(DeploymentPlatform):
    """Pretends to deploy and returns Vercel-shaped results."""

    def __init__(self, delay_seconds: float = 0.5):
        super().__init__()
        self.delay_seconds = delay_seconds

    @property
    def name(self) -> str:
        return "mock"

    async def create_deployment(
        self,
        *,
        name: str,
        target: DeploymentTarget,
        git_source: GitSource,
        alias: list[str] | None = None,
    ) -> CreatedDeployment:
        # Simulate deployment delay
        await asyncio.sleep(self.delay_seconds)

        deployment_id = f"dpl_{uuid.uuid4().hex[:12]}"
        # Bare host, the way Vercel reports it
        url = f"{name}-{uuid.uuid4().hex[:8]}.vercel.app"

        self.logger.info(
            "mock_platform.deployment",
            deployment_id=deployment_id,
            url=url,
            repo=f"{git_source.owner}/{git_source.repo}@{git_source.ref}",
            target=target,
        )

        return CreatedDeployment(
            id=deployment_id,
            url=url,
            status="QUEUED",
            alias=alias or [],
            created_at=int(time.time() * 1000),
            inspector_url=f"vercel.com/mock/{name}/{deployment_id}",
            project_id=f"prj_{uuid.uuid4().hex[:12]}",
        )

    async def add_project_domain(self, project: str, domain: str) -> ProjectDomain:
        return ProjectDomain(name=domain, verified=False)

    async def upsert_env_vars(
        self, project: str, env_vars: list[EnvVarSpec]
    ) -> list[str]:
        return [env_var.key for env_var in env_vars]

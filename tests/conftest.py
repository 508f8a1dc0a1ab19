"""Pytest configuration and fixtures."""

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from vortex.api.deps import get_platform
from vortex.core.exceptions import PlatformError
from vortex.main import app
from vortex.models.deployment import GitSource
from vortex.platforms.base import (
    CreatedDeployment,
    DeploymentPlatform,
    EnvVarSpec,
    ProjectDomain,
)


class FakePlatform(DeploymentPlatform):
    """Records every call; each step can be told to fail."""

    def __init__(
        self,
        create_error: PlatformError | None = None,
        domain_error: PlatformError | None = None,
        env_error: PlatformError | None = None,
    ):
        super().__init__()
        self.create_error = create_error
        self.domain_error = domain_error
        self.env_error = env_error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    @property
    def name(self) -> str:
        return "fake"

    def calls_to(self, method: str) -> list[dict[str, Any]]:
        return [kwargs for name, kwargs in self.calls if name == method]

    async def create_deployment(
        self,
        *,
        name: str,
        target: str,
        git_source: GitSource,
        alias: list[str] | None = None,
    ) -> CreatedDeployment:
        self.calls.append(
            (
                "create_deployment",
                {"name": name, "target": target, "git_source": git_source, "alias": alias},
            )
        )
        if self.create_error:
            raise self.create_error
        return CreatedDeployment(
            id="dpl_abc123",
            url=f"{name}-abc123.vercel.app",
            status="QUEUED",
            alias=alias or [],
            created_at=1700000000000,
            inspector_url=f"vercel.com/acme/{name}/abc123",
        )

    async def add_project_domain(self, project: str, domain: str) -> ProjectDomain:
        self.calls.append(("add_project_domain", {"project": project, "domain": domain}))
        if self.domain_error:
            raise self.domain_error
        return ProjectDomain(name=domain, verified=True)

    async def upsert_env_vars(
        self, project: str, env_vars: list[EnvVarSpec]
    ) -> list[str]:
        self.calls.append(("upsert_env_vars", {"project": project, "env_vars": env_vars}))
        if self.env_error:
            raise self.env_error
        return [env_var.key for env_var in env_vars]


@pytest.fixture
def fake_platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
async def client(fake_platform: FakePlatform) -> AsyncClient:
    """Async test client whose deployments go to ``fake_platform``."""
    app.dependency_overrides[get_platform] = lambda: fake_platform

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """Minimal well-formed deploy request body."""
    return {
        "repositoryUrl": "https://github.com/acme/widget",
        "userName": "alice",
        "projectName": "widget-prod",
        "branch": "main",
        "target": "production",
    }

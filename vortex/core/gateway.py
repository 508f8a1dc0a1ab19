"""Deployment gateway.

Runs a validated request against the deployment platform as a short
pipeline: create the deployment, then optionally attach the domain, then
optionally upsert environment variables. Only the first step can fail the
request; the follow-ups fold their failures into their own outcome.
"""

import time

from vortex.core.classify import classify_platform_error
from vortex.core.exceptions import PlatformError
from vortex.core.urls import parse_repository_url
from vortex.models.deployment import (
    DeploymentRequest,
    DeploymentResult,
    DomainAttachOutcome,
    EnvVarsOutcome,
    GitSource,
)
from vortex.models.form import EnvVar
from vortex.models.outcome import DeploySuccess
from vortex.platforms.base import CreatedDeployment, DeploymentPlatform, EnvVarSpec
from vortex.utils.logging import get_logger

logger = get_logger(__name__)

INITIAL_DEPLOYMENT_STATE = "BUILDING"


class DeploymentGateway:
    """Forwards deployment requests to a platform."""

    def __init__(self, platform: DeploymentPlatform):
        self.platform = platform

    async def deploy(self, request: DeploymentRequest) -> DeploySuccess:
        """Deploy ``request`` and report every step's outcome.

        Raises:
            RepositoryUrlError: repository URL has no owner/repo path.
            GatewayError: the platform rejected the deployment itself.
        """
        start_time = time.perf_counter()

        owner, repo = parse_repository_url(request.repository_url)
        git_source = GitSource(owner=owner, repo=repo, ref=request.branch)
        alias = [request.domain_name] if request.domain_name else None

        logger.info(
            "gateway.deploy_started",
            platform=self.platform.name,
            project=request.project_name,
            repo=f"{owner}/{repo}",
            ref=request.branch,
            target=request.target,
        )

        try:
            created = await self.platform.create_deployment(
                name=request.project_name,
                target=request.target,
                git_source=git_source,
                alias=alias,
            )
        except PlatformError as e:
            error = classify_platform_error(e)
            logger.warning(
                "gateway.deploy_failed",
                project=request.project_name,
                kind=error.kind.value,
                status_code=e.status_code,
                error=e.message,
            )
            raise error from e

        project = created.project_id or request.project_name

        domain = None
        if request.domain_name:
            domain = await self._attach_domain(project, request.domain_name)

        env_vars = None
        if request.env_vars:
            env_vars = await self._upsert_env_vars(project, request.env_vars)

        logger.info(
            "gateway.deploy_completed",
            deployment_id=created.id,
            domain_added=domain.added if domain else None,
            env_vars_added=env_vars.added if env_vars else None,
            duration_ms=int((time.perf_counter() - start_time) * 1000),
        )

        return DeploySuccess(
            deployment=self._to_result(created),
            domain=domain,
            env_vars=env_vars,
        )

    async def _attach_domain(self, project: str, domain: str) -> DomainAttachOutcome:
        try:
            attached = await self.platform.add_project_domain(project, domain)
        except PlatformError as e:
            logger.warning("gateway.domain_failed", domain=domain, error=e.message)
            return DomainAttachOutcome(name=domain, added=False, error=e.message)

        return DomainAttachOutcome(name=attached.name, added=True, status=attached.status)

    async def _upsert_env_vars(
        self, project: str, env_vars: list[EnvVar]
    ) -> EnvVarsOutcome:
        specs = [EnvVarSpec(key=env_var.key, value=env_var.value) for env_var in env_vars]
        try:
            keys = await self.platform.upsert_env_vars(project, specs)
        except PlatformError as e:
            logger.warning("gateway.env_vars_failed", count=len(specs), error=e.message)
            return EnvVarsOutcome(added=False, error=e.message)

        return EnvVarsOutcome(added=True, count=len(keys), variables=keys)

    def _to_result(self, created: CreatedDeployment) -> DeploymentResult:
        return DeploymentResult(
            id=created.id,
            status=created.status,
            url=created.url,
            alias=created.alias or None,
            created_at=created.created_at,
            ready_at=created.ready,
            state=INITIAL_DEPLOYMENT_STATE,
            inspector_url=created.inspector_url,
        )

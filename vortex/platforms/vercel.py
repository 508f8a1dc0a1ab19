"""Vercel REST API client.

Talks to the three endpoints a form deployment needs: create deployment,
add project domain and upsert project environment variables.
"""

from typing import Any
from urllib.parse import quote

import httpx

from vortex.config import Settings
from vortex.core.exceptions import PlatformError
from vortex.models.deployment import GitSource
from vortex.models.form import DeploymentTarget
from vortex.platforms.base import (
    CreatedDeployment,
    DeploymentPlatform,
    EnvVarSpec,
    ProjectDomain,
)

DEFAULT_API_URL = "https://api.vercel.com"


class VercelPlatform(DeploymentPlatform):
    """Deploys GitHub repositories through the Vercel API."""

    def __init__(
        self,
        token: str,
        team_id: str | None = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__()
        self._token = token
        self.team_id = team_id
        self.api_url = api_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout)
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "VercelPlatform":
        return cls(
            token=settings.vercel_token,
            team_id=settings.vercel_team_id,
            api_url=settings.vercel_api_url,
            timeout=settings.platform_timeout_seconds,
        )

    @property
    def name(self) -> str:
        return "vercel"

    async def create_deployment(
        self,
        *,
        name: str,
        target: DeploymentTarget,
        git_source: GitSource,
        alias: list[str] | None = None,
    ) -> CreatedDeployment:
        payload: dict[str, Any] = {
            "name": name,
            "target": target,
            "gitSource": {
                "type": git_source.type,
                "org": git_source.owner,
                "repo": git_source.repo,
                "ref": git_source.ref,
            },
        }
        if alias:
            payload["alias"] = alias

        data = await self._request(
            "POST",
            "/v13/deployments",
            json=payload,
            params={"skipAutoDetectionConfirmation": "1"},
        )
        if "id" not in data:
            raise PlatformError("Unexpected response from Vercel")
        return CreatedDeployment(
            id=data["id"],
            url=data.get("url") or "",
            status=data.get("status") or data.get("readyState") or "",
            alias=data.get("alias") or [],
            created_at=data.get("createdAt"),
            ready=data.get("ready"),
            inspector_url=data.get("inspectorUrl"),
            project_id=data.get("projectId"),
        )

    async def add_project_domain(self, project: str, domain: str) -> ProjectDomain:
        data = await self._request(
            "POST",
            f"/v10/projects/{quote(project, safe='')}/domains",
            json={"name": domain},
        )
        return ProjectDomain(
            name=data.get("name") or domain,
            verified=bool(data.get("verified")),
        )

    async def upsert_env_vars(
        self, project: str, env_vars: list[EnvVarSpec]
    ) -> list[str]:
        data = await self._request(
            "POST",
            f"/v10/projects/{quote(project, safe='')}/env",
            json=[env_var.model_dump() for env_var in env_vars],
            params={"upsert": "true"},
        )

        failed = data.get("failed") or []
        if failed:
            error = failed[0].get("error") or {}
            raise PlatformError(
                error.get("message") or "Failed to store environment variables",
                code=error.get("code"),
            )

        created = data.get("created")
        if isinstance(created, dict):
            created = [created]
        if created:
            return [item["key"] for item in created if "key" in item]
        return [env_var.key for env_var in env_vars]

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Send an authenticated request and return the decoded JSON body."""
        if not self._token:
            raise PlatformError(
                "VERCEL_TOKEN is not configured",
                status_code=401,
                code="missing_token",
            )

        query = dict(params or {})
        if self.team_id:
            query["teamId"] = self.team_id

        self.logger.debug("vercel.request", method=method, path=path)

        try:
            async with httpx.AsyncClient(
                base_url=self.api_url,
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, json=json, params=query)
        except httpx.HTTPError as e:
            self.logger.error("vercel.transport_error", path=path, error=str(e))
            raise PlatformError(f"Could not reach Vercel: {e}") from e

        if response.is_error:
            raise self._error_from_response(response)

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            self.logger.error(
                "vercel.unexpected_response",
                status_code=response.status_code,
                path=path,
            )
            raise PlatformError(
                "Unexpected response from Vercel",
                status_code=response.status_code,
            )
        return body

    def _error_from_response(self, response: httpx.Response) -> PlatformError:
        """Build a PlatformError from a Vercel ``{"error": {...}}`` body."""
        code = None
        message = ""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            code = body["error"].get("code")
            message = body["error"].get("message") or ""

        message = message or response.text or response.reason_phrase

        self.logger.warning(
            "vercel.error_response",
            status_code=response.status_code,
            code=code,
            path=response.request.url.path,
        )
        return PlatformError(message, status_code=response.status_code, code=code)

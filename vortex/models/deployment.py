"""Deployment data models."""

from typing import Callable, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from vortex.core.urls import normalize_url
from vortex.core.validation import (
    check_branch,
    check_domain_name,
    check_env_vars,
    check_password,
    check_project_name,
    check_repository_url,
    check_user_name,
)
from vortex.models.form import DeploymentTarget, EnvVar, WireModel


def _enforce(rule: Callable[..., str | None], value):
    message = rule(value)
    if message:
        raise PydanticCustomError("form_rule", message)
    return value


class DeploymentRequest(WireModel):
    """Validated body of ``POST /api/deploy``."""

    repository_url: str
    user_name: str
    # Accepted for wire compatibility; deployments authenticate with the
    # server-side platform token only.
    password: str | None = None
    domain_name: str | None = None
    project_name: str
    branch: str = "main"
    target: DeploymentTarget = "production"
    env_vars: list[EnvVar] = Field(default_factory=list)

    @field_validator("repository_url")
    @classmethod
    def _check_repository_url(cls, value: str) -> str:
        return _enforce(check_repository_url, value)

    @field_validator("user_name")
    @classmethod
    def _check_user_name(cls, value: str) -> str:
        return _enforce(check_user_name, value)

    @field_validator("password")
    @classmethod
    def _check_password(cls, value: str | None) -> str | None:
        return _enforce(check_password, value)

    @field_validator("domain_name")
    @classmethod
    def _check_domain_name(cls, value: str | None) -> str | None:
        return _enforce(check_domain_name, value) or None

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        return _enforce(check_project_name, value)

    @field_validator("branch")
    @classmethod
    def _check_branch(cls, value: str) -> str:
        return _enforce(check_branch, value)

    @field_validator("env_vars", mode="before")
    @classmethod
    def _default_env_vars(cls, value):
        return [] if value is None else value

    @field_validator("env_vars")
    @classmethod
    def _check_env_vars(cls, value: list[EnvVar]) -> list[EnvVar]:
        return _enforce(check_env_vars, value)


class GitSource(BaseModel):
    """What the platform should build: provider, owner, repository and ref."""

    type: Literal["github"] = "github"
    owner: str
    repo: str
    ref: str


class DeploymentResult(WireModel):
    """A deployment as reported back to the form."""

    id: str
    status: str = ""
    url: str
    alias: list[str] | None = None
    created_at: int | None = None
    ready_at: int | None = None
    state: str = "BUILDING"
    inspector_url: str | None = None

    @field_validator("url", "inspector_url")
    @classmethod
    def _absolute_url(cls, value: str | None) -> str | None:
        return normalize_url(value)


class DomainAttachOutcome(WireModel):
    """Result of attaching the requested domain to the project."""

    name: str
    added: bool
    status: str | None = None
    error: str | None = None


class EnvVarsOutcome(WireModel):
    """Result of upserting environment variables on the project."""

    added: bool
    count: int = 0
    variables: list[str] | None = None
    error: str | None = None


class FieldDetail(BaseModel):
    """A single violated constraint, keyed by dotted field path."""

    field: str
    message: str

"""Submission outcome models.

Every deployment attempt ends in exactly one of these variants, on the
server (``DeployRequestHandler.handle``) and on the client
(``SubmissionOrchestrator.submit``) alike.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from vortex.core.exceptions import ErrorKind
from vortex.models.deployment import (
    DeploymentResult,
    DomainAttachOutcome,
    EnvVarsOutcome,
    FieldDetail,
)
from vortex.models.form import WireModel

DEPLOY_SUCCESS_MESSAGE = "Deployment created successfully!"
NETWORK_FAILURE_MESSAGE = "Please check your connection and try again."


class DeploySuccess(WireModel):
    """Deployment created; follow-up steps may still have failed."""

    outcome: Literal["success"] = "success"
    deployment: DeploymentResult
    domain: DomainAttachOutcome | None = None
    env_vars: EnvVarsOutcome | None = None
    message: str = DEPLOY_SUCCESS_MESSAGE

    @property
    def is_partial(self) -> bool:
        """True when the domain attach or env-var upsert failed."""
        return bool(
            (self.domain and not self.domain.added)
            or (self.env_vars and not self.env_vars.added)
        )

    def to_body(self) -> dict[str, Any]:
        body = self.model_dump(
            mode="json", by_alias=True, exclude_none=True, exclude={"outcome"}
        )
        return {"success": True, **body}


class ValidationFailure(BaseModel):
    """One or more fields violated their constraints."""

    outcome: Literal["validation_failure"] = "validation_failure"
    details: list[FieldDetail] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: dict[str, str]) -> "ValidationFailure":
        return cls(
            details=[
                FieldDetail(field=field, message=message)
                for field, message in errors.items()
            ]
        )

    @property
    def errors(self) -> dict[str, str]:
        """Details folded into field name -> message (later entries win)."""
        return {detail.field: detail.message for detail in self.details}

    def to_body(self) -> dict[str, Any]:
        return {
            "success": False,
            "error": "Validation failed",
            "details": [detail.model_dump() for detail in self.details],
        }


class GatewayFailure(BaseModel):
    """The deployment platform rejected the primary deployment call."""

    outcome: Literal["gateway_failure"] = "gateway_failure"
    kind: ErrorKind = ErrorKind.UNKNOWN
    error: str
    message: str
    status_code: int = 500

    def to_body(self) -> dict[str, Any]:
        return {
            "success": False,
            "error": self.error,
            "message": self.message,
            "kind": self.kind.value,
        }


class NetworkFailure(BaseModel):
    """No usable response reached the client."""

    outcome: Literal["network_failure"] = "network_failure"
    message: str = NETWORK_FAILURE_MESSAGE


SubmissionOutcome = Annotated[
    Union[DeploySuccess, ValidationFailure, GatewayFailure, NetworkFailure],
    Field(discriminator="outcome"),
]

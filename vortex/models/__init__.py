"""Data models for Vortex."""

from vortex.models.deployment import (
    DeploymentRequest,
    DeploymentResult,
    DomainAttachOutcome,
    EnvVarsOutcome,
    FieldDetail,
    GitSource,
)
from vortex.models.form import DeploymentTarget, EnvVar, FormState
from vortex.models.outcome import (
    DeploySuccess,
    GatewayFailure,
    NetworkFailure,
    SubmissionOutcome,
    ValidationFailure,
)

__all__ = [
    # Form models
    "DeploymentTarget",
    "EnvVar",
    "FormState",
    # Deployment models
    "DeploymentRequest",
    "DeploymentResult",
    "DomainAttachOutcome",
    "EnvVarsOutcome",
    "FieldDetail",
    "GitSource",
    # Outcomes
    "DeploySuccess",
    "GatewayFailure",
    "NetworkFailure",
    "SubmissionOutcome",
    "ValidationFailure",
]

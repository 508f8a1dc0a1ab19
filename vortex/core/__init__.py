"""Core functionality for Vortex."""

from vortex.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DeploymentError,
    ErrorKind,
    GatewayError,
    PlatformError,
    RepositoryUrlError,
    ResourceNotFoundError,
    SubmissionInProgressError,
    VortexError,
)

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "DeploymentError",
    "ErrorKind",
    "GatewayError",
    "PlatformError",
    "RepositoryUrlError",
    "ResourceNotFoundError",
    "SubmissionInProgressError",
    "VortexError",
]

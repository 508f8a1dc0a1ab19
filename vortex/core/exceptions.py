"""Custom exceptions for Vortex."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Classification of a failed deployment request."""

    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"
    INVALID_INPUT = "invalid_input"
    UNKNOWN = "unknown"


class VortexError(Exception):
    """Base exception for Vortex."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RepositoryUrlError(VortexError):
    """Repository URL could not be split into owner and repository."""

    def __init__(self, url: str):
        super().__init__("Invalid GitHub repository URL", {"repository_url": url})
        self.url = url


class PlatformError(VortexError):
    """The deployment platform rejected a call.

    Raised by platform clients. ``status_code`` and ``code`` are None when the
    platform never answered (transport failure) or sent no error code.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
    ):
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if code:
            details["code"] = code
        super().__init__(message, details)
        self.status_code = status_code
        self.code = code


class GatewayError(VortexError):
    """Primary deployment call failed; fatal for the request."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    default_status_code: int = 500

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int | None = None,
    ):
        super().__init__(message, {"error": error})
        self.error = error
        self.status_code = status_code or self.default_status_code


class AuthenticationError(GatewayError):
    """Platform credential is invalid, expired or lacks access."""

    kind = ErrorKind.AUTHENTICATION
    default_status_code = 401


class ResourceNotFoundError(GatewayError):
    """Repository or branch does not exist or is not accessible."""

    kind = ErrorKind.NOT_FOUND
    default_status_code = 404


class ConfigurationError(GatewayError):
    """Project settings or git source are incompatible with the platform."""

    kind = ErrorKind.CONFIGURATION
    default_status_code = 400


class DeploymentError(GatewayError):
    """Deployment failed for an unclassified reason."""

    kind = ErrorKind.UNKNOWN
    default_status_code = 500


class SubmissionInProgressError(VortexError):
    """A submission is already outstanding for this form."""

    def __init__(self) -> None:
        super().__init__("A deployment submission is already in progress")

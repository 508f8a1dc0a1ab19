"""Map platform failures onto the error taxonomy."""

from vortex.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DeploymentError,
    ErrorKind,
    GatewayError,
    PlatformError,
    ResourceNotFoundError,
)

TOKEN_EXPIRED_MESSAGE = (
    "Vercel token is invalid or expired. "
    "Please check your VERCEL_TOKEN environment variable."
)
INCORRECT_GIT_SOURCE = "incorrect_git_source_info"
_AUTH_HINTS = ("forbidden", "not authorized")
_CONFIG_HINTS = ("projectSettings", "framework")


def classify_platform_error(exc: PlatformError) -> GatewayError:
    """Translate a failed create-deployment call into a GatewayError.

    HTTP status and platform error code decide first. The message is only
    inspected when neither identifies the failure.
    """
    if exc.status_code == 401:
        return AuthenticationError(
            "Authentication failed",
            "Invalid Vercel token. Check your VERCEL_TOKEN environment variable.",
            status_code=401,
        )
    if exc.status_code == 403:
        return AuthenticationError("Access denied", TOKEN_EXPIRED_MESSAGE, status_code=403)
    if exc.status_code == 404:
        return ResourceNotFoundError(
            "Repository not found",
            "Repository not found. Check the repository URL and permissions.",
            status_code=404,
        )
    if exc.code == INCORRECT_GIT_SOURCE or INCORRECT_GIT_SOURCE in exc.message:
        return ConfigurationError(
            "Git source could not be resolved",
            "The repository or branch cannot be deployed. Check the repository URL and branch name.",
        )

    lowered = exc.message.lower()
    if any(hint in lowered for hint in _AUTH_HINTS):
        return AuthenticationError(
            "Vercel authentication failed", TOKEN_EXPIRED_MESSAGE, status_code=403
        )
    if any(hint in exc.message for hint in _CONFIG_HINTS):
        return ConfigurationError(
            exc.message,
            "Project configuration error. Please check your repository setup.",
        )

    return DeploymentError(
        exc.message or "Unknown error occurred",
        "Deployment failed. Check your Vercel token and repository permissions.",
    )


def classify_error_message(message: str) -> ErrorKind:
    """Guess the failure kind from free-text error wording.

    Fallback for responses that do not carry a ``kind``.
    """
    if "Vercel token" in message or "invalid" in message or "expired" in message:
        return ErrorKind.AUTHENTICATION
    if "Repository not found" in message:
        return ErrorKind.NOT_FOUND
    if any(hint in message for hint in _CONFIG_HINTS):
        return ErrorKind.CONFIGURATION
    return ErrorKind.UNKNOWN

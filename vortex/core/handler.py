"""Server-side handling of deployment form submissions."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from vortex.core.exceptions import ErrorKind, GatewayError, RepositoryUrlError
from vortex.core.gateway import DeploymentGateway
from vortex.models.deployment import DeploymentRequest, FieldDetail
from vortex.models.outcome import GatewayFailure, SubmissionOutcome, ValidationFailure
from vortex.utils.logging import get_logger

logger = get_logger(__name__)


def _field_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "body"


class DeployRequestHandler:
    """Validates a raw request body and runs it through the gateway.

    Client-side validation is advisory; every body is re-validated here and
    rejected on any violation before the platform is contacted.
    """

    def __init__(self, gateway: DeploymentGateway):
        self.gateway = gateway

    async def handle(self, raw_body: Any) -> SubmissionOutcome:
        try:
            request = DeploymentRequest.model_validate(raw_body)
        except PydanticValidationError as e:
            details = [
                FieldDetail(field=_field_path(error["loc"]), message=error["msg"])
                for error in e.errors()
            ]
            logger.info(
                "deploy.validation_failed",
                fields=[detail.field for detail in details],
            )
            return ValidationFailure(details=details)

        try:
            return await self.gateway.deploy(request)
        except RepositoryUrlError as e:
            logger.warning("deploy.bad_repository_url", url=e.url)
            return GatewayFailure(
                kind=ErrorKind.INVALID_INPUT,
                error=e.message,
                message="Please check your repository URL.",
                status_code=400,
            )
        except GatewayError as e:
            return GatewayFailure(
                kind=e.kind,
                error=e.error,
                message=e.message,
                status_code=e.status_code,
            )

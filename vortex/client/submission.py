"""Submission orchestrator.

Validates the form, posts it to the deploy endpoint and turns the response
into a SubmissionOutcome, updating the form controller along the way.
"""

import asyncio
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from vortex.client.form import FormController
from vortex.config import settings
from vortex.core.classify import classify_error_message
from vortex.core.exceptions import ErrorKind, SubmissionInProgressError
from vortex.core.validation import validate_form
from vortex.models.deployment import FieldDetail
from vortex.models.outcome import (
    DeploySuccess,
    GatewayFailure,
    NetworkFailure,
    SubmissionOutcome,
    ValidationFailure,
)
from vortex.utils.logging import get_logger

logger = get_logger(__name__)

FIX_ERRORS_MESSAGE = "Please fix the errors above and try again."
DEFAULT_FAILURE_MESSAGE = (
    "Deployment failed. Please check your credentials and try again."
)


def interpret_response(body: Any, status_code: int) -> SubmissionOutcome:
    """Turn a decoded ``/api/deploy`` response body into an outcome."""
    if not isinstance(body, dict):
        return NetworkFailure()

    if body.get("success"):
        try:
            return DeploySuccess.model_validate(body)
        except PydanticValidationError as e:
            logger.error("submission.malformed_success", error=str(e))
            return NetworkFailure()

    details = body.get("details")
    if isinstance(details, list):
        try:
            return ValidationFailure(
                details=[FieldDetail.model_validate(detail) for detail in details]
            )
        except PydanticValidationError as e:
            logger.error("submission.malformed_details", error=str(e))
            return NetworkFailure()

    # Prefer the error over the message, as the dialog shows one line
    error = body.get("error") or body.get("message") or DEFAULT_FAILURE_MESSAGE
    try:
        kind = ErrorKind(body["kind"])
    except (KeyError, ValueError):
        kind = classify_error_message(error)

    return GatewayFailure(
        kind=kind,
        error=error,
        message=body.get("message") or error,
        status_code=status_code,
    )


class SubmissionOrchestrator:
    """Drives one form's submissions against the deploy endpoint."""

    def __init__(
        self,
        endpoint_url: str | None = None,
        *,
        reset_delay: float | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoint_url = endpoint_url or settings.deploy_endpoint_url
        self.reset_delay = (
            settings.form_reset_delay_seconds if reset_delay is None else reset_delay
        )
        self.timeout = httpx.Timeout(timeout or settings.platform_timeout_seconds)
        self._transport = transport

    async def submit(self, form: FormController) -> SubmissionOutcome:
        """Validate and submit ``form``.

        Raises:
            SubmissionInProgressError: the form already has a submission
                outstanding.
        """
        if form.is_submitting:
            raise SubmissionInProgressError()

        errors = validate_form(form.state)
        if errors:
            logger.info("submission.invalid", fields=sorted(errors))
            form.errors = errors
            form.status = "error"
            form.status_message = FIX_ERRORS_MESSAGE
            return ValidationFailure.from_errors(errors)

        form.cancel_pending_reset()
        form.is_submitting = True
        form.status = "idle"
        form.status_message = ""
        form.result = None
        try:
            outcome = await self._post(form.state.to_payload())
        finally:
            form.is_submitting = False

        self._apply(form, outcome)
        return outcome

    async def _post(self, payload: dict[str, Any]) -> SubmissionOutcome:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.endpoint_url, json=payload)
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("submission.network_error", error=str(e))
            return NetworkFailure()

        logger.info(
            "submission.response",
            status_code=response.status_code,
            success=body.get("success") if isinstance(body, dict) else None,
        )
        return interpret_response(body, response.status_code)

    def _apply(self, form: FormController, outcome: SubmissionOutcome) -> None:
        """Reflect ``outcome`` on the form controller."""
        if isinstance(outcome, DeploySuccess):
            form.status = "success"
            form.result = outcome.deployment
            form.status_message = outcome.message
            loop = asyncio.get_running_loop()
            form.pending_reset = loop.call_later(self.reset_delay, form.reset)
        elif isinstance(outcome, ValidationFailure):
            form.status = "error"
            form.errors = outcome.errors
            form.status_message = ""
        else:
            form.status = "error"
            form.status_message = (
                outcome.error if isinstance(outcome, GatewayFailure) else outcome.message
            )

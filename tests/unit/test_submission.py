"""Unit tests for the submission orchestrator."""

import asyncio
import json

import httpx
import pytest

from vortex.client.form import FormController
from vortex.client.submission import SubmissionOrchestrator, interpret_response
from vortex.core.exceptions import ErrorKind, SubmissionInProgressError
from vortex.models.outcome import (
    DeploySuccess,
    GatewayFailure,
    NetworkFailure,
    ValidationFailure,
)

ENDPOINT = "http://test/api/deploy"

SUCCESS_BODY = {
    "success": True,
    "deployment": {
        "id": "dpl_1",
        "status": "QUEUED",
        "url": "my-app.vercel.app",
        "createdAt": 1700000000000,
        "state": "BUILDING",
        "inspectorUrl": "vercel.com/acme/my-app/1",
    },
    "message": "Deployment created successfully!",
}


@pytest.fixture
def form() -> FormController:
    controller = FormController()
    controller.set_field("repositoryUrl", "https://github.com/acme/widget")
    controller.set_field("userName", "alice")
    controller.set_field("projectName", "widget-prod")
    return controller


def orchestrator_for(handler, reset_delay: float = 10.0) -> SubmissionOrchestrator:
    return SubmissionOrchestrator(
        ENDPOINT,
        reset_delay=reset_delay,
        transport=httpx.MockTransport(handler),
    )


def no_request(request: httpx.Request) -> httpx.Response:
    raise AssertionError("no request expected")


class TestSubmit:
    """Tests for SubmissionOrchestrator.submit."""

    @pytest.mark.asyncio
    async def test_invalid_form_never_hits_network(self):
        form = FormController()

        outcome = await orchestrator_for(no_request).submit(form)

        assert isinstance(outcome, ValidationFailure)
        assert "repositoryUrl" in form.errors
        assert form.status == "error"
        assert form.status_message == "Please fix the errors above and try again."

    @pytest.mark.asyncio
    async def test_incomplete_env_var_blocks_submission(self, form: FormController):
        form.add_env_var()
        form.update_env_var(0, "key", "API_KEY")
        form.update_env_var(0, "value", "x")
        form.add_env_var()
        form.update_env_var(1, "value", "y")

        outcome = await orchestrator_for(no_request).submit(form)

        assert isinstance(outcome, ValidationFailure)
        assert outcome.errors == {
            "envVars": "All environment variables must have both key and value"
        }

    @pytest.mark.asyncio
    async def test_success(self, form: FormController):
        sent: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(json.loads(request.content))
            return httpx.Response(200, json=SUCCESS_BODY)

        outcome = await orchestrator_for(handler).submit(form)

        assert sent[0]["repositoryUrl"] == "https://github.com/acme/widget"
        assert sent[0]["branch"] == "main"
        assert sent[0]["envVars"] == []

        assert isinstance(outcome, DeploySuccess)
        assert outcome.deployment.url == "https://my-app.vercel.app"
        assert outcome.deployment.inspector_url == "https://vercel.com/acme/my-app/1"
        assert form.status == "success"
        assert form.result == outcome.deployment
        assert form.is_submitting is False
        assert form.pending_reset is not None
        form.cancel_pending_reset()

    @pytest.mark.asyncio
    async def test_success_resets_form_after_delay(self, form: FormController):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=SUCCESS_BODY)

        await orchestrator_for(handler, reset_delay=0.01).submit(form)
        assert form.status == "success"

        await asyncio.sleep(0.05)

        assert form.status == "idle"
        assert form.result is None
        assert form.state.repository_url == ""

    @pytest.mark.asyncio
    async def test_server_validation_details(self, form: FormController):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400,
                json={
                    "success": False,
                    "error": "Validation failed",
                    "details": [{"field": "projectName", "message": "Taken"}],
                },
            )

        outcome = await orchestrator_for(handler).submit(form)

        assert isinstance(outcome, ValidationFailure)
        assert form.errors == {"projectName": "Taken"}
        assert form.status == "error"

    @pytest.mark.asyncio
    async def test_gateway_failure_uses_server_kind(self, form: FormController):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                404,
                json={
                    "success": False,
                    "error": "Repository not found",
                    "message": "Repository not found. Check the repository URL and permissions.",
                    "kind": "not_found",
                },
            )

        outcome = await orchestrator_for(handler).submit(form)

        assert isinstance(outcome, GatewayFailure)
        assert outcome.kind is ErrorKind.NOT_FOUND
        assert outcome.status_code == 404
        assert form.status_message == "Repository not found"

    @pytest.mark.asyncio
    async def test_network_failure(self, form: FormController):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        outcome = await orchestrator_for(handler).submit(form)

        assert isinstance(outcome, NetworkFailure)
        assert form.status == "error"
        assert form.is_submitting is False

    @pytest.mark.asyncio
    async def test_unparseable_body(self, form: FormController):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        outcome = await orchestrator_for(handler).submit(form)

        assert isinstance(outcome, NetworkFailure)

    @pytest.mark.asyncio
    async def test_malformed_validation_details(self, form: FormController):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"success": False, "details": [{"field": "x"}]})

        outcome = await orchestrator_for(handler).submit(form)

        assert isinstance(outcome, NetworkFailure)
        assert form.status == "error"
        assert form.is_submitting is False

    @pytest.mark.asyncio
    async def test_rejects_concurrent_submission(self, form: FormController):
        form.is_submitting = True

        with pytest.raises(SubmissionInProgressError):
            await orchestrator_for(no_request).submit(form)


class TestInterpretResponse:
    """Tests for interpret_response."""

    def test_classifies_untyped_error(self):
        outcome = interpret_response(
            {
                "success": False,
                "error": "Vercel authentication failed",
                "message": "Vercel token is invalid or expired.",
            },
            403,
        )

        # error text alone has no hint; falls back to "Deployment Failed"
        assert outcome.kind is ErrorKind.UNKNOWN
        assert outcome.error == "Vercel authentication failed"

    def test_classifies_message_when_error_missing(self):
        outcome = interpret_response(
            {"success": False, "message": "Vercel token is invalid or expired."}, 403
        )

        assert outcome.kind is ErrorKind.AUTHENTICATION

    def test_unknown_kind_falls_back_to_substring(self):
        outcome = interpret_response(
            {"success": False, "error": "framework not detected", "kind": "mystery"}, 400
        )

        assert outcome.kind is ErrorKind.CONFIGURATION

    def test_partial_success_carries_sub_outcomes(self):
        body = {
            **SUCCESS_BODY,
            "domain": {"name": "widget.example.com", "added": False, "error": "Taken"},
            "envVars": {"added": True, "count": 1, "variables": ["API_KEY"]},
        }

        outcome = interpret_response(body, 200)

        assert outcome.is_partial
        assert outcome.domain.error == "Taken"
        assert outcome.env_vars.variables == ["API_KEY"]

    def test_non_object_body(self):
        assert isinstance(interpret_response(["nope"], 200), NetworkFailure)

    @pytest.mark.parametrize(
        "details",
        [[{"field": "userName"}], ["userName is required"]],
    )
    def test_malformed_details(self, details: list):
        outcome = interpret_response({"success": False, "details": details}, 400)

        assert isinstance(outcome, NetworkFailure)

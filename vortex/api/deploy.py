"""Deployment endpoints."""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from vortex.api.deps import HandlerDep
from vortex.models.outcome import (
    DeploySuccess,
    GatewayFailure,
    SubmissionOutcome,
    ValidationFailure,
)

router = APIRouter()


class DeployStatusResponse(BaseModel):
    """Liveness response for the deploy route."""

    status: str = "ok"
    message: str


def outcome_response(outcome: SubmissionOutcome) -> JSONResponse:
    """Render a server-side outcome as the route's JSON response."""
    if isinstance(outcome, DeploySuccess):
        return JSONResponse(status_code=status.HTTP_200_OK, content=outcome.to_body())
    if isinstance(outcome, ValidationFailure):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=outcome.to_body()
        )
    if isinstance(outcome, GatewayFailure):
        return JSONResponse(status_code=outcome.status_code, content=outcome.to_body())
    raise TypeError(f"No response for outcome {type(outcome).__name__}")


@router.post(
    "/deploy",
    summary="Deploy a GitHub repository",
    responses={
        400: {"description": "Validation failed or project misconfigured"},
        401: {"description": "Platform token rejected"},
        403: {"description": "Platform token invalid or expired"},
        404: {"description": "Repository not found"},
    },
)
async def create_deployment(request: Request, handler: HandlerDep) -> JSONResponse:
    """Validate the form body and create a deployment on the platform."""
    try:
        body = await request.json()
    except ValueError:
        body = None
    outcome = await handler.handle(body)
    return outcome_response(outcome)


@router.get("/deploy", response_model=DeployStatusResponse)
async def deploy_status() -> DeployStatusResponse:
    """Check that the deploy route is up."""
    return DeployStatusResponse(status="ok", message="Deployment API is running")

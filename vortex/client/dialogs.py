"""Dialog content for submission outcomes."""

from dataclasses import dataclass, field
from typing import Literal

from vortex.core.exceptions import ErrorKind
from vortex.models.outcome import (
    DeploySuccess,
    GatewayFailure,
    NetworkFailure,
    SubmissionOutcome,
)

DialogIcon = Literal["success", "error", "warning", "info"]

_FAILURE_PRESENTATION: dict[ErrorKind, tuple[DialogIcon, str]] = {
    ErrorKind.AUTHENTICATION: ("warning", "Authentication Error"),
    ErrorKind.NOT_FOUND: ("info", "Repository Error"),
    ErrorKind.CONFIGURATION: ("info", "Project Configuration Error"),
}


@dataclass
class DialogSection:
    """A highlighted block below the main dialog text."""

    heading: str
    lines: list[str] = field(default_factory=list)
    tone: Literal["info", "warning"] = "info"


@dataclass
class Dialog:
    """A modal notification: icon, title, body lines and extra sections."""

    icon: DialogIcon
    title: str
    lines: list[str] = field(default_factory=list)
    sections: list[DialogSection] = field(default_factory=list)


def build_dialog(outcome: SubmissionOutcome) -> Dialog | None:
    """Describe the dialog to show for ``outcome``.

    Validation failures are shown inline next to the fields, so they get
    no dialog.
    """
    if isinstance(outcome, DeploySuccess):
        return _success_dialog(outcome)
    if isinstance(outcome, GatewayFailure):
        icon, title = _FAILURE_PRESENTATION.get(outcome.kind, ("error", "Deployment Failed"))
        return Dialog(icon=icon, title=title, lines=[outcome.error])
    if isinstance(outcome, NetworkFailure):
        return Dialog(icon="error", title="Network Error", lines=[outcome.message])
    return None


def _success_dialog(outcome: DeploySuccess) -> Dialog:
    deployment = outcome.deployment
    lines = [
        f"Deployment ID: {deployment.id}",
        f"Status: {deployment.status}",
        f"URL: {deployment.url}",
    ]
    if deployment.alias:
        lines.append(f"Alias: {', '.join(deployment.alias)}")

    sections = []
    domain = outcome.domain
    if domain is not None:
        if domain.added:
            sections.append(
                DialogSection(
                    heading=f"Domain Added: {domain.name}",
                    lines=[
                        f"Status: {domain.status}",
                        "Domain configuration may take a few minutes to propagate.",
                    ],
                )
            )
        else:
            sections.append(
                DialogSection(
                    heading=f"Domain Error: {domain.name}",
                    lines=[f"Error: {domain.error}"],
                    tone="warning",
                )
            )

    env_vars = outcome.env_vars
    if env_vars is not None:
        if env_vars.added:
            sections.append(
                DialogSection(
                    heading=f"Environment Variables Added: {env_vars.count} variables",
                    lines=[
                        f"Variables: {', '.join(env_vars.variables or [])}",
                        "Environment variables are now available in your deployment.",
                    ],
                )
            )
        else:
            sections.append(
                DialogSection(
                    heading="Environment Variables Error",
                    lines=[f"Error: {env_vars.error}"],
                    tone="warning",
                )
            )

    return Dialog(
        icon="success",
        title="Deployment Created!",
        lines=lines,
        sections=sections,
    )

"""Form state controller.

Holds what the user has typed, the per-field error messages and the
submission status shown next to the form.
"""

import asyncio
from typing import Any, Literal

from vortex.core.validation import FieldErrors
from vortex.models.deployment import DeploymentResult
from vortex.models.form import EnvVar, FormState

FormStatus = Literal["idle", "success", "error"]

REQUIRED_FIELDS = ("repository_url", "user_name", "project_name", "branch")
ENV_VARS_FIELD = "envVars"


def _resolve_field(name: str) -> tuple[str, str]:
    """Return ``(attribute, wire name)`` for either spelling of a field."""
    for attribute, info in FormState.model_fields.items():
        alias = info.alias or attribute
        if name in (attribute, alias):
            return attribute, alias
    raise KeyError(f"Unknown form field: {name}")


class FormController:
    """Mutable form state for one deployment form instance."""

    def __init__(self, state: FormState | None = None):
        self.state = state or FormState()
        self.errors: FieldErrors = {}
        self.status: FormStatus = "idle"
        self.status_message = ""
        self.result: DeploymentResult | None = None
        self.is_submitting = False
        self.pending_reset: asyncio.TimerHandle | None = None

    def set_field(self, name: str, value: Any) -> None:
        """Update one field and drop only that field's error."""
        attribute, alias = _resolve_field(name)
        self.state = self.state.model_copy(update={attribute: value})
        self.errors.pop(alias, None)

    def add_env_var(self) -> None:
        self.state = self.state.model_copy(
            update={"env_vars": [*self.state.env_vars, EnvVar()]}
        )

    def remove_env_var(self, index: int) -> None:
        env_vars = [ev for i, ev in enumerate(self.state.env_vars) if i != index]
        self.state = self.state.model_copy(update={"env_vars": env_vars})
        self.errors.pop(ENV_VARS_FIELD, None)

    def update_env_var(self, index: int, field: Literal["key", "value"], value: str) -> None:
        env_vars = [
            ev.model_copy(update={field: value}) if i == index else ev
            for i, ev in enumerate(self.state.env_vars)
        ]
        self.state = self.state.model_copy(update={"env_vars": env_vars})
        self.errors.pop(ENV_VARS_FIELD, None)

    @property
    def can_submit(self) -> bool:
        """Required fields are filled in and nothing is in flight."""
        filled = all(getattr(self.state, field) for field in REQUIRED_FIELDS)
        return filled and not self.is_submitting

    def error_summary(self) -> str | None:
        if not self.errors:
            return None
        return "Please fix the following errors: " + ", ".join(self.errors.values())

    def cancel_pending_reset(self) -> None:
        if self.pending_reset is not None:
            self.pending_reset.cancel()
            self.pending_reset = None

    def reset(self) -> None:
        """Return to an empty form with no result shown."""
        self.cancel_pending_reset()
        self.state = FormState()
        self.errors = {}
        self.status = "idle"
        self.status_message = ""
        self.result = None

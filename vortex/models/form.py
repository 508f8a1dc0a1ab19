"""Deployment form data models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DeploymentTarget = Literal["production", "preview"]


class WireModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EnvVar(WireModel):
    """An environment variable row on the form."""

    key: str = ""
    value: str = ""


class FormState(WireModel):
    """Field values as the user is typing them.

    Holds raw, possibly invalid input. Nothing here is validated until
    ``validate_form`` runs on submit.
    """

    repository_url: str = ""
    user_name: str = ""
    password: str = ""
    domain_name: str = ""
    project_name: str = ""
    branch: str = "main"
    target: DeploymentTarget = "production"
    env_vars: list[EnvVar] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the ``POST /api/deploy`` request body."""
        return self.model_dump(mode="json", by_alias=True)

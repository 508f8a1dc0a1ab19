"""Field rules for the deployment form.

Each rule takes a raw field value and returns an error message or None.
The rules back both the client-side ``validate_form`` pass and the server
request schema, so the two sides report the same messages.
"""

import re
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from vortex.models.form import EnvVar, FormState

FieldErrors = dict[str, str]

GITHUB_HOST = "github.com"
REPOSITORY_URL_PATTERN = re.compile(r"^https://github\.com/[^/]+/[^/]+(?:\.git)?$")
PROJECT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")
_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?"
DOMAIN_NAME_PATTERN = re.compile(rf"^{_LABEL}(?:\.{_LABEL})*$")

MIN_USER_NAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def check_repository_url(value: str) -> str | None:
    if not value.strip():
        return "Repository URL is required"
    if GITHUB_HOST not in value:
        return "Please enter a valid GitHub repository URL"
    if not REPOSITORY_URL_PATTERN.fullmatch(value):
        return "Invalid format. Use: https://github.com/username/repository"
    return None


def check_user_name(value: str) -> str | None:
    if not value.strip():
        return "Username is required"
    if len(value) < MIN_USER_NAME_LENGTH:
        return f"Username must be at least {MIN_USER_NAME_LENGTH} characters"
    return None


def check_password(value: str | None) -> str | None:
    # Optional field, only constrained when filled in
    if value and len(value) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return None


def check_project_name(value: str) -> str | None:
    if not value.strip():
        return "Project name is required"
    if not PROJECT_NAME_PATTERN.fullmatch(value):
        return "Only letters, numbers, hyphens, and underscores allowed"
    return None


def check_branch(value: str) -> str | None:
    if not value.strip():
        return "Branch is required"
    return None


def check_domain_name(value: str | None) -> str | None:
    if value and not DOMAIN_NAME_PATTERN.fullmatch(value):
        return "Invalid domain format (e.g., mydomain.com)"
    return None


def check_env_vars(env_vars: Iterable["EnvVar"]) -> str | None:
    """Flag the whole list when any entry is missing its key or value."""
    for env_var in env_vars:
        if not env_var.key.strip() or not env_var.value.strip():
            return "All environment variables must have both key and value"
    return None


def validate_form(form: "FormState") -> FieldErrors:
    """Validate every field of a form and collect all failures.

    Pure and deterministic: the same form always yields the same mapping,
    keyed by wire field name. An empty mapping means the form can be
    submitted.
    """
    checks = {
        "repositoryUrl": check_repository_url(form.repository_url),
        "userName": check_user_name(form.user_name),
        "password": check_password(form.password),
        "projectName": check_project_name(form.project_name),
        "branch": check_branch(form.branch),
        "domainName": check_domain_name(form.domain_name),
        "envVars": check_env_vars(form.env_vars),
    }
    return {field: message for field, message in checks.items() if message}

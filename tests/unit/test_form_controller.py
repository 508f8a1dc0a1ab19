"""Unit tests for the form state controller."""

import pytest

from vortex.client.form import FormController
from vortex.core.validation import validate_form


@pytest.fixture
def controller() -> FormController:
    return FormController()


class TestFormController:
    """Tests for FormController."""

    def test_starts_empty(self, controller: FormController):
        assert controller.state.repository_url == ""
        assert controller.state.branch == "main"
        assert controller.state.target == "production"
        assert controller.state.env_vars == []
        assert controller.status == "idle"
        assert controller.can_submit is False

    def test_set_field_accepts_both_spellings(self, controller: FormController):
        controller.set_field("repositoryUrl", "https://github.com/acme/widget")
        controller.set_field("user_name", "alice")

        assert controller.state.repository_url == "https://github.com/acme/widget"
        assert controller.state.user_name == "alice"

    def test_unknown_field(self, controller: FormController):
        with pytest.raises(KeyError):
            controller.set_field("nickname", "x")

    def test_editing_clears_only_that_error(self, controller: FormController):
        controller.errors = validate_form(controller.state)
        assert {"repositoryUrl", "userName", "projectName"} <= set(controller.errors)

        controller.set_field("userName", "alice")

        assert "userName" not in controller.errors
        assert "repositoryUrl" in controller.errors
        assert "projectName" in controller.errors

    def test_env_var_rows(self, controller: FormController):
        controller.add_env_var()
        controller.add_env_var()
        controller.update_env_var(0, "key", "API_KEY")
        controller.update_env_var(0, "value", "x")
        controller.update_env_var(1, "key", "DROP_ME")

        controller.remove_env_var(1)

        assert [(ev.key, ev.value) for ev in controller.state.env_vars] == [("API_KEY", "x")]

    def test_env_var_edit_clears_env_error(self, controller: FormController):
        controller.add_env_var()
        controller.errors = {"envVars": "bad", "branch": "Branch is required"}

        controller.update_env_var(0, "key", "API_KEY")

        assert controller.errors == {"branch": "Branch is required"}

    def test_can_submit_needs_required_fields(self, controller: FormController):
        controller.set_field("repositoryUrl", "https://github.com/acme/widget")
        controller.set_field("userName", "alice")
        controller.set_field("projectName", "widget")
        assert controller.can_submit is True

        controller.is_submitting = True
        assert controller.can_submit is False

    def test_error_summary(self, controller: FormController):
        assert controller.error_summary() is None

        controller.errors = {"userName": "Username is required", "branch": "Branch is required"}

        assert controller.error_summary() == (
            "Please fix the following errors: Username is required, Branch is required"
        )

    def test_reset(self, controller: FormController):
        controller.set_field("projectName", "widget")
        controller.add_env_var()
        controller.status = "success"
        controller.status_message = "done"

        controller.reset()

        assert controller.state.project_name == ""
        assert controller.state.env_vars == []
        assert controller.status == "idle"
        assert controller.status_message == ""
        assert controller.result is None

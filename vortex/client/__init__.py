"""Client side of the deployment form."""

from vortex.client.dialogs import Dialog, DialogSection, build_dialog
from vortex.client.form import FormController
from vortex.client.submission import SubmissionOrchestrator, interpret_response

__all__ = [
    "Dialog",
    "DialogSection",
    "FormController",
    "SubmissionOrchestrator",
    "build_dialog",
    "interpret_response",
]

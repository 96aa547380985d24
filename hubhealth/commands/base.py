"""Base types and definitions for commands."""

from dataclasses import dataclass
from typing import Protocol

from hubhealth.services.model import Model

MESSAGE_PATIENT_NOT_FOUND = "No patient with NRIC {} found in HubHealth"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of executing a command."""

    feedback: str
    show_help: bool = False
    exit: bool = False
    show_viewed_patient: bool = False


class Command(Protocol):
    """A parsed user command, ready to run against the model."""

    def execute(self, model: Model) -> CommandResult:
        """Run the command.

        Raises:
            CommandError: If the command cannot be carried out
        """
        ...

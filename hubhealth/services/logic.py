"""Command execution service."""

from pathlib import Path
from typing import Protocol

from hubhealth.commands import CommandResult
from hubhealth.models.exceptions import CommandError
from hubhealth.models.patient import Patient
from hubhealth.parser import CommandRegistry, get_command_registry
from hubhealth.services.model import Model
from hubhealth.services.storage import Storage
from hubhealth.utils.logging import get_logger

logger = get_logger(__name__)

MESSAGE_FILE_OPS_ERROR = "Could not save data due to the following error: {}"
MESSAGE_FILE_PERMISSION_ERROR = "Could not save data to file {} due to insufficient permissions to write to the file."


class Logic(Protocol):
    """Interface the user interface talks to."""

    def execute(self, command_text: str) -> CommandResult:
        """Parse and run one line of user input.

        Raises:
            ParseError: If the input cannot be parsed
            CommandError: If the command cannot be carried out
        """
        ...

    @property
    def filtered_patients(self) -> list[Patient]: ...

    @property
    def viewed_patient(self) -> Patient | None: ...

    @property
    def patient_book_file_path(self) -> Path: ...


class LogicManager:
    """Default ``Logic`` implementation.

    Saves the patient book after every successfully executed command.
    """

    def __init__(self, model: Model, storage: Storage, registry: CommandRegistry | None = None):
        self.model = model
        self.storage = storage
        self.registry = registry or get_command_registry()

    def execute(self, command_text: str) -> CommandResult:
        logger.info(f"----------------[USER COMMAND][{command_text}]")

        command = self.registry.parse_command(command_text)
        result = command.execute(self.model)

        try:
            self.storage.save_patient_book(self.model.patient_book)
        except PermissionError as e:
            raise CommandError(MESSAGE_FILE_PERMISSION_ERROR.format(e.filename)) from e
        except OSError as e:
            raise CommandError(MESSAGE_FILE_OPS_ERROR.format(e)) from e

        logger.info(f"Result: {result.feedback}")
        return result

    @property
    def filtered_patients(self) -> list[Patient]:
        return self.model.filtered_patients

    @property
    def viewed_patient(self) -> Patient | None:
        return self.model.viewed_patient

    @property
    def patient_book_file_path(self) -> Path:
        return self.model.patient_book_file_path

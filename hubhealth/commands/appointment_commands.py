"""Appointment add and remove commands."""

from dataclasses import dataclass

from hubhealth.commands.base import MESSAGE_PATIENT_NOT_FOUND, CommandResult
from hubhealth.models.appointment import Appointment
from hubhealth.models.exceptions import CommandError, DuplicateAppointmentError
from hubhealth.services.model import Model
from hubhealth.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AddAppointmentCommand:
    """Add an appointment to the patient with the given NRIC.

    Start times in the past are accepted so that earlier visits can be
    recorded. Different patients may share a start time.
    """

    nric: str
    appointment: Appointment

    def execute(self, model: Model) -> CommandResult:
        patient = model.get_patient(self.nric)
        if patient is None:
            raise CommandError(MESSAGE_PATIENT_NOT_FOUND.format(self.nric))

        try:
            updated = patient.with_appointment(self.appointment)
        except DuplicateAppointmentError as e:
            raise CommandError(f"This appointment already exists for {patient.name}") from e

        model.set_patient(patient, updated)
        model.set_viewed_patient(updated)
        logger.info(f"Added appointment {self.appointment} for {self.nric}")
        return CommandResult(
            f"New appointment added for {patient.name}: {self.appointment}",
            show_viewed_patient=True,
        )


@dataclass(frozen=True)
class RemoveAppointmentCommand:
    """Remove an appointment, by its one-based position, from a patient."""

    nric: str
    index: int

    def execute(self, model: Model) -> CommandResult:
        patient = model.get_patient(self.nric)
        if patient is None:
            raise CommandError(MESSAGE_PATIENT_NOT_FOUND.format(self.nric))

        try:
            updated, removed = patient.without_appointment(self.index - 1)
        except IndexError as e:
            raise CommandError(
                f"The appointment index provided is invalid: {patient.name} has "
                f"{len(patient.appointments)} appointment(s)"
            ) from e

        model.set_patient(patient, updated)
        model.set_viewed_patient(updated)
        logger.info(f"Removed appointment {removed} for {self.nric}")
        return CommandResult(f"Removed appointment for {patient.name}: {removed}", show_viewed_patient=True)

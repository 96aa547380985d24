"""Commands that add, remove, find and show patients."""

from dataclasses import dataclass

from hubhealth.commands.base import MESSAGE_PATIENT_NOT_FOUND, CommandResult
from hubhealth.models.exceptions import CommandError
from hubhealth.models.fields import format_date
from hubhealth.models.patient import Patient
from hubhealth.models.patient_book import PatientBook
from hubhealth.services.model import Model, show_all_patients
from hubhealth.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AddCommand:
    """Add a new patient."""

    patient: Patient

    def execute(self, model: Model) -> CommandResult:
        if model.has_patient(self.patient):
            raise CommandError("This patient already exists in HubHealth")

        model.add_patient(self.patient)
        logger.info(f"Added patient {self.patient.nric}")
        return CommandResult(f"New patient added: {self.patient}")


@dataclass(frozen=True)
class RemoveCommand:
    """Remove the patient with the given NRIC.

    Patients are removed by NRIC rather than list position so that a typo
    in a number cannot delete the wrong record.
    """

    nric: str

    def execute(self, model: Model) -> CommandResult:
        patient = model.get_patient(self.nric)
        if patient is None:
            raise CommandError(MESSAGE_PATIENT_NOT_FOUND.format(self.nric))

        model.remove_patient(patient)
        logger.info(f"Removed patient {self.nric}")
        return CommandResult(f"Removed patient: {patient}")


@dataclass(frozen=True)
class ViewPatientCommand:
    """Show the full details of one patient."""

    nric: str

    def execute(self, model: Model) -> CommandResult:
        patient = model.get_patient(self.nric)
        if patient is None:
            raise CommandError(MESSAGE_PATIENT_NOT_FOUND.format(self.nric))

        model.set_viewed_patient(patient)
        return CommandResult(
            f"Showing details of {patient.name} (NRIC: {patient.nric}, "
            f"born {format_date(patient.date_of_birth)}, "
            f"{len(patient.appointments)} appointment(s))",
            show_viewed_patient=True,
        )


@dataclass(frozen=True)
class ListCommand:
    def execute(self, model: Model) -> CommandResult:
        model.update_filter(show_all_patients)
        model.set_viewed_patient(None)
        return CommandResult("Listed all patients")


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches patients whose name contains any keyword as a whole word."""

    keywords: tuple[str, ...]

    def __call__(self, patient: Patient) -> bool:
        words = {word.casefold() for word in patient.name.split()}
        return any(keyword.casefold() in words for keyword in self.keywords)


@dataclass(frozen=True)
class FindCommand:
    """List patients whose names contain any of the keywords (case-insensitive)."""

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: Model) -> CommandResult:
        model.update_filter(self.predicate)
        model.set_viewed_patient(None)
        return CommandResult(f"{len(model.filtered_patients)} patients listed!")


@dataclass(frozen=True)
class ClearCommand:
    def execute(self, model: Model) -> CommandResult:
        model.set_patient_book(PatientBook())
        logger.info("Cleared all patients")
        return CommandResult("HubHealth has been cleared!")

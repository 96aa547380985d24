"""In-memory model of the application's data."""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from hubhealth.models.patient import Patient
from hubhealth.models.patient_book import PatientBook
from hubhealth.models.prefs import UserPrefs
from hubhealth.utils.logging import get_logger

logger = get_logger(__name__)

PatientPredicate = Callable[[Patient], bool]


def show_all_patients(patient: Patient) -> bool:
    return True


class Model(Protocol):
    """Interface for the in-memory model used by commands."""

    @property
    def patient_book(self) -> PatientBook: ...

    @property
    def user_prefs(self) -> UserPrefs: ...

    @property
    def patient_book_file_path(self) -> Path: ...

    @property
    def filtered_patients(self) -> list[Patient]: ...

    @property
    def viewed_patient(self) -> Patient | None: ...

    def set_patient_book(self, book: PatientBook) -> None: ...

    def has_patient(self, patient: Patient) -> bool: ...

    def get_patient(self, nric: str) -> Patient | None: ...

    def add_patient(self, patient: Patient) -> None: ...

    def remove_patient(self, patient: Patient) -> None: ...

    def set_patient(self, target: Patient, edited: Patient) -> None: ...

    def update_filter(self, predicate: PatientPredicate) -> None: ...

    def set_viewed_patient(self, patient: Patient | None) -> None: ...


class ModelManager:
    """Default ``Model`` implementation.

    Holds the patient book, user preferences, the active list filter and the
    patient whose details are currently on display.
    """

    def __init__(self, patient_book: PatientBook | None = None, user_prefs: UserPrefs | None = None):
        """Initialize the model.

        Args:
            patient_book: Initial data, copied into a fresh book
            user_prefs: Preferences, defaults when omitted
        """
        self._patient_book = PatientBook()
        if patient_book is not None:
            self._patient_book.reset_data(patient_book)
        self._user_prefs = user_prefs.model_copy() if user_prefs else UserPrefs()
        self._predicate: PatientPredicate = show_all_patients
        self._viewed_nric: str | None = None

        logger.debug(f"Initializing with {len(self._patient_book)} patients and prefs {self._user_prefs}")

    @property
    def patient_book(self) -> PatientBook:
        return self._patient_book

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    @property
    def patient_book_file_path(self) -> Path:
        return self._user_prefs.patient_book_file_path

    @property
    def filtered_patients(self) -> list[Patient]:
        """Patients that pass the current filter, in insertion order."""
        return [patient for patient in self._patient_book.patients if self._predicate(patient)]

    @property
    def viewed_patient(self) -> Patient | None:
        """The patient whose details are on display, looked up fresh each time."""
        if self._viewed_nric is None:
            return None
        return self._patient_book.get_patient(self._viewed_nric)

    def set_patient_book(self, book: PatientBook) -> None:
        self._patient_book.reset_data(book)
        self._viewed_nric = None

    def has_patient(self, patient: Patient) -> bool:
        return self._patient_book.has_patient(patient)

    def get_patient(self, nric: str) -> Patient | None:
        return self._patient_book.get_patient(nric)

    def add_patient(self, patient: Patient) -> None:
        self._patient_book.add_patient(patient)
        self.update_filter(show_all_patients)

    def remove_patient(self, patient: Patient) -> None:
        self._patient_book.remove_patient(patient)
        if self._viewed_nric == patient.nric:
            self._viewed_nric = None

    def set_patient(self, target: Patient, edited: Patient) -> None:
        self._patient_book.set_patient(target, edited)
        if self._viewed_nric == target.nric:
            self._viewed_nric = edited.nric

    def update_filter(self, predicate: PatientPredicate) -> None:
        self._predicate = predicate

    def set_viewed_patient(self, patient: Patient | None) -> None:
        self._viewed_nric = patient.nric if patient else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._patient_book == other._patient_book
            and self._user_prefs == other._user_prefs
            and self.filtered_patients == other.filtered_patients
        )

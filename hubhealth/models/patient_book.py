"""In-memory collection of patients."""

from collections.abc import Iterable, Iterator

from hubhealth.models.exceptions import DuplicatePatientError, PatientNotFoundError
from hubhealth.models.patient import Patient


class UniquePatientList:
    """A list of patients in which no two patients are the same person.

    Uniqueness is checked with ``Patient.is_same_patient``; removal and
    replacement match by strong equality.
    """

    def __init__(self, patients: Iterable[Patient] = ()):
        self._patients: list[Patient] = []
        self.set_patients(patients)

    def contains(self, patient: Patient) -> bool:
        return any(existing.is_same_patient(patient) for existing in self._patients)

    def add(self, patient: Patient) -> None:
        """Add a patient.

        Raises:
            DuplicatePatientError: If the patient already exists
        """
        if self.contains(patient):
            raise DuplicatePatientError()
        self._patients.append(patient)

    def set_patient(self, target: Patient, edited: Patient) -> None:
        """Replace ``target`` with ``edited`` at the same position.

        Raises:
            PatientNotFoundError: If ``target`` is not in the list
            DuplicatePatientError: If ``edited`` clashes with another patient
        """
        index = self._index_of(target)

        if not target.is_same_patient(edited) and self.contains(edited):
            raise DuplicatePatientError()

        self._patients[index] = edited

    def remove(self, patient: Patient) -> None:
        """Remove a patient.

        Raises:
            PatientNotFoundError: If the patient is not in the list
        """
        del self._patients[self._index_of(patient)]

    def set_patients(self, patients: Iterable[Patient]) -> None:
        """Replace the whole list.

        Raises:
            DuplicatePatientError: If ``patients`` contains the same person twice
        """
        replacement = list(patients)
        for i, patient in enumerate(replacement):
            if any(patient.is_same_patient(other) for other in replacement[i + 1 :]):
                raise DuplicatePatientError()
        self._patients = replacement

    def find_by_nric(self, nric: str) -> Patient | None:
        for patient in self._patients:
            if patient.nric == nric:
                return patient
        return None

    def _index_of(self, patient: Patient) -> int:
        try:
            return self._patients.index(patient)
        except ValueError as e:
            raise PatientNotFoundError(f"No patient with NRIC {patient.nric}") from e

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._patients)

    def __len__(self) -> int:
        return len(self._patients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniquePatientList):
            return NotImplemented
        return self._patients == other._patients


class PatientBook:
    """All patient records held by HubHealth."""

    def __init__(self, patients: Iterable[Patient] = ()):
        self._patients = UniquePatientList(patients)

    @property
    def patients(self) -> tuple[Patient, ...]:
        """Read-only view of every patient, in insertion order."""
        return tuple(self._patients)

    def reset_data(self, other: "PatientBook") -> None:
        self._patients.set_patients(other.patients)

    def has_patient(self, patient: Patient) -> bool:
        return self._patients.contains(patient)

    def add_patient(self, patient: Patient) -> None:
        self._patients.add(patient)

    def set_patient(self, target: Patient, edited: Patient) -> None:
        self._patients.set_patient(target, edited)

    def remove_patient(self, patient: Patient) -> None:
        self._patients.remove(patient)

    def get_patient(self, nric: str) -> Patient | None:
        """Look up a patient by (upper-case) NRIC."""
        return self._patients.find_by_nric(nric)

    def __len__(self) -> int:
        return len(self._patients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatientBook):
            return NotImplemented
        return self._patients == other._patients

    def __repr__(self) -> str:
        return f"PatientBook(patients={len(self)})"

"""JSON-friendly versions of the patient models used by storage."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hubhealth.models.appointment import Appointment
from hubhealth.models.exceptions import DuplicateAppointmentError, DuplicatePatientError
from hubhealth.models.fields import (
    format_date,
    validate_date_of_birth,
    validate_name,
    validate_nric,
    validate_phone,
    validate_tag,
)
from hubhealth.models.patient import Patient
from hubhealth.models.patient_book import PatientBook

MISSING_FIELD_MESSAGE_FORMAT = "Patient's {} field is missing!"
MESSAGE_DUPLICATE_PATIENT = "Patients list contains duplicate patient(s)."


def _require(value: str | None, field_name: str, validator: Callable[[str], Any]) -> Any:
    if value is None:
        raise ValueError(MISSING_FIELD_MESSAGE_FORMAT.format(field_name))
    return validator(value)


class JsonAdaptedPatient(BaseModel):
    """Storage form of a ``Patient``.

    Every field is optional here so that a missing field surfaces as a
    readable message from ``to_model`` rather than a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    phone: str | None = None
    nric: str | None = None
    date_of_birth: str | None = Field(default=None, alias="dob")
    tags: list[str] = Field(default_factory=list)
    appointments: list[str] = Field(default_factory=list)

    @field_validator("tags", "appointments", mode="before")
    @classmethod
    def default_missing_lists(cls, v: Any) -> Any:
        """Treat a null list as an empty one."""
        return [] if v is None else v

    @classmethod
    def from_model(cls, patient: Patient) -> "JsonAdaptedPatient":
        return cls(
            name=patient.name,
            phone=patient.phone,
            nric=patient.nric,
            date_of_birth=format_date(patient.date_of_birth),
            tags=sorted(patient.tags),
            appointments=[str(appointment) for appointment in patient.appointments],
        )

    def to_model(self) -> Patient:
        """Convert to the model's ``Patient``.

        Raises:
            ValueError: If a field is missing or violates its constraints
        """
        patient = Patient(
            nric=_require(self.nric, "Nric", validate_nric),
            name=_require(self.name, "Name", validate_name),
            phone=_require(self.phone, "Phone", validate_phone),
            date_of_birth=_require(self.date_of_birth, "DateOfBirth", validate_date_of_birth),
            tags=frozenset(validate_tag(tag) for tag in self.tags),
        )

        for text in self.appointments:
            try:
                patient = patient.with_appointment(Appointment.parse(text))
            except DuplicateAppointmentError as e:
                raise ValueError(str(e)) from e

        return patient


class JsonSerializablePatientBook(BaseModel):
    """Storage form of the whole ``PatientBook``."""

    patients: list[JsonAdaptedPatient] = Field(default_factory=list)

    @classmethod
    def from_model(cls, book: PatientBook) -> "JsonSerializablePatientBook":
        return cls(patients=[JsonAdaptedPatient.from_model(patient) for patient in book.patients])

    def to_model(self) -> PatientBook:
        """Convert to the model's ``PatientBook``.

        Raises:
            ValueError: If any patient is invalid or duplicated
        """
        book = PatientBook()
        for adapted in self.patients:
            try:
                book.add_patient(adapted.to_model())
            except DuplicatePatientError as e:
                raise ValueError(MESSAGE_DUPLICATE_PATIENT) from e
        return book

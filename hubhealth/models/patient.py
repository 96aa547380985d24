"""Patient data models."""

import bisect
from dataclasses import dataclass, field, replace
from datetime import date

from hubhealth.models.appointment import Appointment
from hubhealth.models.exceptions import DuplicateAppointmentError
from hubhealth.models.fields import format_date


@dataclass(frozen=True)
class Patient:
    """Patient business model.

    Patients are immutable: appointment changes return a new ``Patient`` so
    the patient book can swap the record in place. Appointments are kept in
    ascending start order and take no part in equality.
    """

    nric: str
    name: str
    phone: str
    date_of_birth: date
    tags: frozenset[str] = frozenset()
    appointments: tuple[Appointment, ...] = field(default=(), compare=False)

    def is_same_patient(self, other: "Patient | None") -> bool:
        """Return True if both records describe the same person.

        Two patients are the same when their NRICs match, or when name,
        phone and date of birth all match.
        """
        if other is self:
            return True

        return other is not None and (
            other.nric == self.nric
            or (other.name == self.name and other.phone == self.phone and other.date_of_birth == self.date_of_birth)
        )

    def has_appointment(self, appointment: Appointment) -> bool:
        return appointment in self.appointments

    def with_appointment(self, appointment: Appointment) -> "Patient":
        """Return a copy of this patient with the appointment added.

        Raises:
            DuplicateAppointmentError: If an appointment with the same start exists
        """
        if self.has_appointment(appointment):
            raise DuplicateAppointmentError(f"{self.name} already has an appointment at {appointment}")

        appointments = list(self.appointments)
        bisect.insort(appointments, appointment)
        return replace(self, appointments=tuple(appointments))

    def without_appointment(self, index: int) -> tuple["Patient", Appointment]:
        """Return a copy of this patient without the appointment at ``index``.

        Args:
            index: Zero-based position in the appointment list

        Returns:
            The updated patient and the removed appointment

        Raises:
            IndexError: If there is no appointment at ``index``
        """
        if not 0 <= index < len(self.appointments):
            raise IndexError(index)

        removed = self.appointments[index]
        remaining = self.appointments[:index] + self.appointments[index + 1 :]
        return replace(self, appointments=remaining), removed

    def __str__(self) -> str:
        text = (
            f"{self.name}; NRIC: {self.nric}; Phone: {self.phone}; Date of Birth: {format_date(self.date_of_birth)}"
        )
        if self.tags:
            text += "; Tags: " + ", ".join(f"[{tag}]" for tag in sorted(self.tags))
        return text

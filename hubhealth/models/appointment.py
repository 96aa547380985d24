"""Appointment data model."""

from dataclasses import dataclass
from datetime import datetime

from hubhealth.models.fields import format_date_time, validate_appointment_start


@dataclass(frozen=True, order=True)
class Appointment:
    """A patient appointment, identified by its start date and time."""

    start: datetime

    @classmethod
    def parse(cls, text: str) -> "Appointment":
        """Create an appointment from DD/MM/YYYY HH:MM text.

        Raises:
            ValueError: If the text is not a valid date and time
        """
        return cls(start=validate_appointment_start(text))

    def __str__(self) -> str:
        return format_date_time(self.start)

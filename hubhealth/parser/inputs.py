"""Input schemas validating the arguments of each command."""

import re
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from hubhealth.models.fields import (
    validate_appointment_start,
    validate_date_of_birth,
    validate_name,
    validate_nric,
    validate_phone,
    validate_tag,
)

INDEX_CONSTRAINTS = "Index should be a positive integer, e.g. 1"


class NricInput(BaseModel):
    """Input schema for commands that only identify a patient."""

    nric: str = Field(..., description="Patient's NRIC", examples=["T0288759A", "S1234567A"])

    @field_validator("nric")
    @classmethod
    def check_nric(cls, v: str) -> str:
        return validate_nric(v)


class AddPatientInput(NricInput):
    """Input schema for the add command."""

    name: str = Field(..., description="Patient's full name", examples=["John Tan"])
    phone: str = Field(..., description="8-digit Singapore phone number", examples=["89897777"])
    date_of_birth: date = Field(..., description="Date of birth in DD/MM/YYYY format", examples=["02/02/2002"])
    tags: list[str] = Field(default_factory=list, description="Optional tags", examples=[["diabetic"]])

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return validate_name(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        return validate_phone(v)

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def check_date_of_birth(cls, v: object) -> date:
        if isinstance(v, date):
            return v
        return validate_date_of_birth(str(v))

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v: list[str]) -> list[str]:
        return [validate_tag(tag) for tag in v]


class AddAppointmentInput(NricInput):
    """Input schema for the addappt command."""

    start: datetime = Field(
        ..., description="Appointment start in DD/MM/YYYY HH:MM format", examples=["25/06/2025 17:00"]
    )

    @field_validator("start", mode="before")
    @classmethod
    def check_start(cls, v: object) -> datetime:
        if isinstance(v, datetime):
            return v
        return validate_appointment_start(str(v))


class RemoveAppointmentInput(NricInput):
    """Input schema for the rmappt command."""

    index: int = Field(..., description="One-based appointment number as shown by viewp", examples=[1])

    @field_validator("index", mode="before")
    @classmethod
    def check_index(cls, v: object) -> int:
        text = str(v).strip()
        if not re.fullmatch(r"\d+", text) or int(text) < 1:
            raise ValueError(INDEX_CONSTRAINTS)
        return int(text)


class FindInput(BaseModel):
    """Input schema for the find command."""

    keywords: list[str] = Field(..., min_length=1, description="Name keywords", examples=[["alice", "bob"]])

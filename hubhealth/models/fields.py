"""Validation rules for patient and appointment fields.

Each ``validate_*`` function takes raw user or file text, returns the
normalised value and raises ``ValueError`` carrying the field's constraint
message when the text is not acceptable.
"""

import re
from datetime import date, datetime

DATE_FORMAT = "%d/%m/%Y"
DATE_TIME_FORMAT = "%d/%m/%Y %H:%M"
EARLIEST_BIRTH_YEAR = 1900

NRIC_CONSTRAINTS = (
    "NRIC should start with S, T, F, G or M, followed by 7 digits and end with a letter, e.g. S1234567A"
)
NAME_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
PHONE_CONSTRAINTS = "Phone numbers should be 8 digits long and start with 3, 6, 8 or 9"
DATE_OF_BIRTH_CONSTRAINTS = (
    f"Date of birth should be a valid date in DD/MM/YYYY format, "
    f"not earlier than {EARLIEST_BIRTH_YEAR} and not in the future"
)
TAG_CONSTRAINTS = "Tags names should be alphanumeric"
APPOINTMENT_CONSTRAINTS = "Appointment should be a valid date and time in DD/MM/YYYY HH:MM format, e.g. 25/06/2025 17:00"

_NRIC_PATTERN = re.compile(r"^[STFGM]\d{7}[A-Z]$")
_NAME_PATTERN = re.compile(r"^[^\W_]+( [^\W_]+)*$")
_PHONE_PATTERN = re.compile(r"^[3689]\d{7}$")
_TAG_PATTERN = re.compile(r"^[^\W_]+$")
_DATE_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$")
_DATE_TIME_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4} \d{2}:\d{2}$")


def validate_nric(value: str) -> str:
    """Validate an NRIC and return it upper-cased."""
    nric = value.strip().upper()
    if not _NRIC_PATTERN.match(nric):
        raise ValueError(NRIC_CONSTRAINTS)
    return nric


def validate_name(value: str) -> str:
    """Validate a name and collapse runs of whitespace."""
    name = " ".join(value.split())
    if not _NAME_PATTERN.match(name):
        raise ValueError(NAME_CONSTRAINTS)
    return name


def validate_phone(value: str) -> str:
    """Validate a Singapore phone number."""
    phone = value.strip()
    if not _PHONE_PATTERN.match(phone):
        raise ValueError(PHONE_CONSTRAINTS)
    return phone


def validate_date_of_birth(value: str, today: date | None = None) -> date:
    """Parse a DD/MM/YYYY date of birth.

    Args:
        value: Raw date text
        today: Reference date for the "not in the future" check

    Returns:
        The parsed date
    """
    text = value.strip()
    if not _DATE_PATTERN.match(text):
        raise ValueError(DATE_OF_BIRTH_CONSTRAINTS)

    try:
        birth_date = datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(DATE_OF_BIRTH_CONSTRAINTS) from e

    if today is None:
        today = date.today()

    if birth_date.year < EARLIEST_BIRTH_YEAR or birth_date > today:
        raise ValueError(DATE_OF_BIRTH_CONSTRAINTS)

    return birth_date


def validate_tag(value: str) -> str:
    tag = value.strip()
    if not _TAG_PATTERN.match(tag):
        raise ValueError(TAG_CONSTRAINTS)
    return tag


def validate_appointment_start(value: str) -> datetime:
    """Parse a DD/MM/YYYY HH:MM appointment start. Past dates are accepted."""
    text = " ".join(value.split())
    if not _DATE_TIME_PATTERN.match(text):
        raise ValueError(APPOINTMENT_CONSTRAINTS)

    try:
        return datetime.strptime(text, DATE_TIME_FORMAT)
    except ValueError as e:
        raise ValueError(APPOINTMENT_CONSTRAINTS) from e


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_date_time(value: datetime) -> str:
    return value.strftime(DATE_TIME_FORMAT)

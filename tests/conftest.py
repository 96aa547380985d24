"""Shared fixtures for HubHealth tests."""

from datetime import date, datetime

import pytest

from hubhealth.models.appointment import Appointment
from hubhealth.models.patient import Patient
from hubhealth.models.patient_book import PatientBook
from hubhealth.services.model import ModelManager


@pytest.fixture
def make_patient():
    """Factory for patients with sensible defaults."""

    def _make_patient(**overrides) -> Patient:
        fields = {
            "nric": "T0288759A",
            "name": "John Tan",
            "phone": "89897777",
            "date_of_birth": date(2002, 2, 2),
            "tags": frozenset(),
            "appointments": (),
        }
        fields.update(overrides)
        return Patient(**fields)

    return _make_patient


@pytest.fixture
def john(make_patient) -> Patient:
    return make_patient()


@pytest.fixture
def alice(make_patient) -> Patient:
    return make_patient(
        nric="S1234567A",
        name="Alice Pauline",
        phone="94351253",
        date_of_birth=date(1990, 5, 17),
        tags=frozenset({"friends"}),
        appointments=(
            Appointment(datetime(2025, 6, 25, 17, 0)),
            Appointment(datetime(2025, 7, 1, 9, 30)),
        ),
    )


@pytest.fixture
def benson(make_patient) -> Patient:
    return make_patient(
        nric="S7654321B",
        name="Benson Meier",
        phone="98765432",
        date_of_birth=date(1985, 12, 1),
        tags=frozenset({"owesMoney", "friends"}),
    )


@pytest.fixture
def patient_book(alice, benson) -> PatientBook:
    return PatientBook([alice, benson])


@pytest.fixture
def model(patient_book) -> ModelManager:
    return ModelManager(patient_book)

"""Sample patients shown on first launch."""

from datetime import date, datetime

from hubhealth.models.appointment import Appointment
from hubhealth.models.patient import Patient
from hubhealth.models.patient_book import PatientBook

SAMPLE_PATIENTS: list[Patient] = [
    Patient(
        nric="S9123456Z",
        name="John Doe",
        phone="91234567",
        date_of_birth=date(1991, 3, 14),
        tags=frozenset({"diabetic"}),
        appointments=(Appointment(datetime(2025, 6, 25, 17, 0)),),
    ),
    Patient(
        nric="T0288759A",
        name="John Tan",
        phone="89897777",
        date_of_birth=date(2002, 2, 2),
    ),
    Patient(
        nric="S8812345B",
        name="Siti Nurhaliza",
        phone="98765432",
        date_of_birth=date(1988, 11, 30),
        tags=frozenset({"CHASblue"}),
        appointments=(
            Appointment(datetime(2025, 5, 2, 9, 30)),
            Appointment(datetime(2025, 7, 11, 14, 0)),
        ),
    ),
    Patient(
        nric="S6543210C",
        name="Lim Ah Kow",
        phone="63456789",
        date_of_birth=date(1965, 8, 9),
        tags=frozenset({"CHASorange", "hypertension"}),
    ),
    Patient(
        nric="G1234567X",
        name="Priya Raman",
        phone="81112222",
        date_of_birth=date(1979, 1, 23),
    ),
]


def get_sample_patient_book() -> PatientBook:
    return PatientBook(SAMPLE_PATIENTS)

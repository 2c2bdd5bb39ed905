from datetime import date

import pytest

from recordkeeper.health.domain import Gender, Patient, Prescription
from recordkeeper.shared.domain import CalendarDate, RecordName


@pytest.fixture
def create_patient():
    """Patient を生成する Factory fixture"""

    def _factory(
        id: int = 1,
        name: str = "Khadija Shaw",
        age: int = 26,
        gender: Gender = Gender.FEMALE,
    ) -> Patient:
        return Patient(id=id, name=RecordName(name), age=age, gender=gender)

    return _factory


@pytest.fixture
def create_prescription(today):
    """Prescription を生成する Factory fixture"""

    def _factory(
        id: int = 101,
        patient_id: int = 1,
        medication_name: str = "Amoxicillin 500mg",
        date_issued: date | None = None,
    ) -> Prescription:
        return Prescription(
            id=id,
            patient_id=patient_id,
            medication_name=RecordName(medication_name),
            date_issued=CalendarDate(date_issued or today),
        )

    return _factory

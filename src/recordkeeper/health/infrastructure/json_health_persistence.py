import os

from recordkeeper.health.domain import Patient, Prescription
from recordkeeper.health.infrastructure.record_models import PatientRow, PrescriptionRow
from recordkeeper.shared.domain import CalendarDate, RecordName
from recordkeeper.shared.infrastructure import JsonFilePersistenceAdapter


class JsonPatientPersistence(JsonFilePersistenceAdapter[Patient]):
    """患者を JSON ファイルで永続化する"""

    record_model = PatientRow

    def __init__(self, file_path: str | os.PathLike | None = None) -> None:
        super().__init__(file_path or os.getenv("PATIENT_DATA_PATH") or "patients.json")

    def _to_item(self, record: Patient) -> dict:
        return record.to_dict()

    def _to_entity(self, row: PatientRow) -> Patient:
        return Patient(
            id=row.id,
            name=RecordName(row.name),
            age=row.age,
            gender=row.gender,
        )


class JsonPrescriptionPersistence(JsonFilePersistenceAdapter[Prescription]):
    """処方箋を JSON ファイルで永続化する"""

    record_model = PrescriptionRow

    def __init__(self, file_path: str | os.PathLike | None = None) -> None:
        super().__init__(
            file_path or os.getenv("PRESCRIPTION_DATA_PATH") or "prescriptions.json"
        )

    def _to_item(self, record: Prescription) -> dict:
        return record.to_dict()

    def _to_entity(self, row: PrescriptionRow) -> Prescription:
        return Prescription(
            id=row.id,
            patient_id=row.patient_id,
            medication_name=RecordName(row.medication_name),
            date_issued=CalendarDate(row.date_issued),
        )

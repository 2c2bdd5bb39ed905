from datetime import date, timedelta

from recordkeeper.health.applications import PrescriptionService
from recordkeeper.health.domain import Gender, Patient, Prescription
from recordkeeper.shared.domain import CalendarDate, KeyedRepository, RecordName
from recordkeeper.shared.utils import get_logger

logger = get_logger("health-records")


def seed_data(service: PrescriptionService, patients: KeyedRepository[Patient], today: date) -> None:
    """サンプルの患者と処方箋を登録する"""
    patients.add(Patient(1, RecordName("Kevin De Bruyne"), 34, Gender.MALE))
    patients.add(Patient(2, RecordName("Pep Guardiola"), 60, Gender.MALE))
    patients.add(Patient(3, RecordName("Khadija Shaw"), 26, Gender.FEMALE))

    for id, patient_id, medication, days_ago in [
        (101, 1, "Amoxicillin 500mg", 10),
        (102, 1, "Paracetamol 1g", 7),
        (103, 2, "Ibuprofen 400mg", 3),
        (104, 2, "Cetirizine 10mg", 1),
        (105, 3, "Metformin 500mg", 0),
    ]:
        service.issue_prescription(
            Prescription(
                id,
                patient_id,
                RecordName(medication),
                CalendarDate(today - timedelta(days=days_ago)),
            )
        )


def run(patient_id: int = 2, today: date | None = None) -> dict:
    """患者一覧と指定患者の処方箋を返す"""
    today = today or date.today()
    patients: KeyedRepository[Patient] = KeyedRepository()
    prescriptions: KeyedRepository[Prescription] = KeyedRepository()
    service = PrescriptionService(patients, prescriptions)

    seed_data(service, patients, today)
    service.build_prescription_map()

    found = service.get_prescriptions_by_patient_id(patient_id)
    if not found:
        logger.warning("No prescriptions found", extra={"patient_id": patient_id})
    else:
        logger.info(
            f"Found {len(found)} prescription(s)", extra={"patient_id": patient_id}
        )

    return {
        "status": "success",
        "patients": [p.to_dict() for p in service.list_patients()],
        "prescriptions": [p.to_dict() for p in found],
    }


if __name__ == "__main__":
    run()

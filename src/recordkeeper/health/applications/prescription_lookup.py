from collections import defaultdict

from recordkeeper.health.domain import Patient, Prescription
from recordkeeper.shared.domain import KeyedRepository, ResourceNotFoundException


class PrescriptionService:
    """患者と処方箋の参照ユースケース

    処方箋は build_prescription_map() の時点のスナップショットを患者IDごとにまとめる。
    """

    def __init__(
        self,
        patients: KeyedRepository[Patient],
        prescriptions: KeyedRepository[Prescription],
    ) -> None:
        self._patients = patients
        self._prescriptions = prescriptions
        self._prescription_map: dict[int, list[Prescription]] = {}

    def list_patients(self) -> list[Patient]:
        return self._patients.get_all()

    def issue_prescription(self, prescription: Prescription) -> None:
        """処方箋を登録する（患者が存在しない場合は登録しない）"""
        if not self._patients.exists(prescription.patient_id):
            raise ResourceNotFoundException(
                f"Patient with Id {prescription.patient_id} not found."
            )
        self._prescriptions.add(prescription)

    def build_prescription_map(self) -> None:
        """処方箋を患者IDごとにまとめ直す"""
        prescription_map: dict[int, list[Prescription]] = defaultdict(list)
        for prescription in self._prescriptions.get_all():
            prescription_map[prescription.patient_id].append(prescription)
        self._prescription_map = dict(prescription_map)

    def get_prescriptions_by_patient_id(self, patient_id: int) -> list[Prescription]:
        """患者の処方箋一覧を返す（該当なしは空リスト）"""
        return list(self._prescription_map.get(patient_id, []))

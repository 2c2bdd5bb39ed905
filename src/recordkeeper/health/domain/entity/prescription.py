from recordkeeper.shared.domain import (
    CalendarDate,
    Entity,
    InvalidValueException,
    RecordName,
)


class Prescription(Entity[int]):
    """処方箋エンティティ"""

    def __init__(
        self,
        id: int,
        patient_id: int,
        medication_name: RecordName,
        date_issued: CalendarDate,
    ) -> None:
        for label, value in (("Id", id), ("Patient id", patient_id)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidValueException(f"{label} must be an integer: {value!r}")
        super().__init__(id)
        self._patient_id = patient_id
        self._medication_name = medication_name
        self._date_issued = date_issued

    @property
    def patient_id(self) -> int:
        return self._patient_id

    @property
    def medication_name(self) -> RecordName:
        return self._medication_name

    @property
    def date_issued(self) -> CalendarDate:
        return self._date_issued

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "patient_id": self._patient_id,
            "medication_name": str(self._medication_name),
            "date_issued": str(self._date_issued),
        }

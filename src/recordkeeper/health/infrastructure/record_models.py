from datetime import date

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from recordkeeper.health.domain import Gender
from recordkeeper.shared.utils import reject_blank


class PatientRow(BaseModel):
    """保存ファイル内の患者1行分のモデル"""

    model_config = ConfigDict(extra="forbid")

    id: StrictInt
    name: str = Field(..., min_length=1)
    age: StrictInt = Field(..., ge=0)
    gender: Gender

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v):
        return reject_blank(v)


class PrescriptionRow(BaseModel):
    """保存ファイル内の処方箋1行分のモデル"""

    model_config = ConfigDict(extra="forbid")

    id: StrictInt
    patient_id: StrictInt
    medication_name: str = Field(..., min_length=1)
    date_issued: date

    @field_validator("medication_name")
    @classmethod
    def medication_name_must_not_be_blank(cls, v):
        return reject_blank(v)

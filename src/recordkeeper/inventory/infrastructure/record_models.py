from datetime import date

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from recordkeeper.shared.utils import reject_blank


class InventoryItemRow(BaseModel):
    """保存ファイル内の在庫品1行分のモデル"""

    model_config = ConfigDict(extra="forbid")

    id: StrictInt
    name: str = Field(..., min_length=1)
    quantity: StrictInt = Field(..., ge=0)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v):
        return reject_blank(v)


class InventoryRecordRow(InventoryItemRow):
    """入庫記録の行モデル"""

    date_added: date


class ElectronicItemRow(InventoryItemRow):
    """電化製品の行モデル"""

    brand: str = Field(..., min_length=1)
    warranty_months: StrictInt = Field(..., ge=0)

    @field_validator("brand")
    @classmethod
    def brand_must_not_be_blank(cls, v):
        return reject_blank(v)


class GroceryItemRow(InventoryItemRow):
    """食料品の行モデル"""

    expiry_date: date

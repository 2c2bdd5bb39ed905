from datetime import date
from typing import TypedDict

from recordkeeper.inventory.domain.entity import (
    ElectronicItem,
    GroceryItem,
    InventoryRecord,
)
from recordkeeper.shared.domain import CalendarDate, Quantity, RecordName


class ElectronicDetails(TypedDict):
    """電化製品の入力データ構造"""

    name: str
    quantity: int
    brand: str
    warranty_months: int


class GroceryDetails(TypedDict):
    """食料品の入力データ構造"""

    name: str
    quantity: int
    expiry_date: date


class RecordDetails(TypedDict):
    """入庫記録の入力データ構造"""

    name: str
    quantity: int
    date_added: date


class InventoryItemFactory:
    """在庫品エンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - 生成時のバリデーションは Value Object に委ねる
    """

    def create_electronic(self, id: int, details: ElectronicDetails) -> ElectronicItem:
        return ElectronicItem(
            id=id,
            name=RecordName(details["name"]),
            quantity=Quantity(details["quantity"]),
            brand=RecordName(details["brand"]),
            warranty_months=details["warranty_months"],
        )

    def create_grocery(self, id: int, details: GroceryDetails) -> GroceryItem:
        return GroceryItem(
            id=id,
            name=RecordName(details["name"]),
            quantity=Quantity(details["quantity"]),
            expiry_date=CalendarDate(details["expiry_date"]),
        )

    def create_record(self, id: int, details: RecordDetails) -> InventoryRecord:
        return InventoryRecord(
            id=id,
            name=RecordName(details["name"]),
            quantity=Quantity(details["quantity"]),
            date_added=CalendarDate(details["date_added"]),
        )

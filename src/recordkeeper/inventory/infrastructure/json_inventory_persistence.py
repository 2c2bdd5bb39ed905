import os

from recordkeeper.inventory.domain.entity import (
    ElectronicItem,
    GroceryItem,
    InventoryRecord,
)
from recordkeeper.inventory.infrastructure.record_models import (
    ElectronicItemRow,
    GroceryItemRow,
    InventoryRecordRow,
)
from recordkeeper.shared.domain import CalendarDate, Quantity, RecordName
from recordkeeper.shared.infrastructure import JsonFilePersistenceAdapter

DEFAULT_DATA_PATH = "inventory.json"


def _data_path(file_path: str | os.PathLike | None) -> str | os.PathLike:
    return file_path or os.getenv("INVENTORY_DATA_PATH") or DEFAULT_DATA_PATH


class JsonInventoryRecordPersistence(JsonFilePersistenceAdapter[InventoryRecord]):
    """入庫記録を JSON ファイルで永続化する"""

    record_model = InventoryRecordRow

    def __init__(self, file_path: str | os.PathLike | None = None) -> None:
        super().__init__(_data_path(file_path))

    def _to_item(self, record: InventoryRecord) -> dict:
        return record.to_dict()

    def _to_entity(self, row: InventoryRecordRow) -> InventoryRecord:
        return InventoryRecord(
            id=row.id,
            name=RecordName(row.name),
            quantity=Quantity(row.quantity),
            date_added=CalendarDate(row.date_added),
        )


class JsonElectronicItemPersistence(JsonFilePersistenceAdapter[ElectronicItem]):
    """電化製品の在庫を JSON ファイルで永続化する"""

    record_model = ElectronicItemRow

    def __init__(self, file_path: str | os.PathLike | None = None) -> None:
        super().__init__(_data_path(file_path))

    def _to_item(self, record: ElectronicItem) -> dict:
        return record.to_dict()

    def _to_entity(self, row: ElectronicItemRow) -> ElectronicItem:
        return ElectronicItem(
            id=row.id,
            name=RecordName(row.name),
            quantity=Quantity(row.quantity),
            brand=RecordName(row.brand),
            warranty_months=row.warranty_months,
        )


class JsonGroceryItemPersistence(JsonFilePersistenceAdapter[GroceryItem]):
    """食料品の在庫を JSON ファイルで永続化する"""

    record_model = GroceryItemRow

    def __init__(self, file_path: str | os.PathLike | None = None) -> None:
        super().__init__(_data_path(file_path))

    def _to_item(self, record: GroceryItem) -> dict:
        return record.to_dict()

    def _to_entity(self, row: GroceryItemRow) -> GroceryItem:
        return GroceryItem(
            id=row.id,
            name=RecordName(row.name),
            quantity=Quantity(row.quantity),
            expiry_date=CalendarDate(row.expiry_date),
        )

from .json_inventory_persistence import (
    JsonElectronicItemPersistence,
    JsonGroceryItemPersistence,
    JsonInventoryRecordPersistence,
)

__all__ = [
    "JsonInventoryRecordPersistence",
    "JsonElectronicItemPersistence",
    "JsonGroceryItemPersistence",
]

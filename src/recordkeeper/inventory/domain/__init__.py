from .entity import ElectronicItem, GroceryItem, InventoryItem, InventoryRecord
from .factory import (
    ElectronicDetails,
    GroceryDetails,
    InventoryItemFactory,
    RecordDetails,
)
from .repository import InventoryRepository

__all__ = [
    "InventoryItem",
    "ElectronicItem",
    "GroceryItem",
    "InventoryRecord",
    "InventoryRepository",
    "InventoryItemFactory",
    "ElectronicDetails",
    "GroceryDetails",
    "RecordDetails",
]

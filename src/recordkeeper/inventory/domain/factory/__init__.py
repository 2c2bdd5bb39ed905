from .inventory_item_factory import (
    ElectronicDetails,
    GroceryDetails,
    InventoryItemFactory,
    RecordDetails,
)

__all__ = [
    "InventoryItemFactory",
    "ElectronicDetails",
    "GroceryDetails",
    "RecordDetails",
]

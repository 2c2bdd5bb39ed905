from .electronic_item import ElectronicItem
from .grocery_item import GroceryItem
from .inventory_item import InventoryItem
from .inventory_record import InventoryRecord

__all__ = ["InventoryItem", "ElectronicItem", "GroceryItem", "InventoryRecord"]

from .inventory_session import InventorySessionService
from .manage_stock import StockService

__all__ = ["StockService", "InventorySessionService"]

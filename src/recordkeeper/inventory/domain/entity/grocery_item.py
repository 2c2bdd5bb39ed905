from recordkeeper.shared.domain import CalendarDate, Quantity, RecordName

from .inventory_item import InventoryItem


class GroceryItem(InventoryItem):
    """食料品の在庫品"""

    def __init__(
        self,
        id: int,
        name: RecordName,
        quantity: Quantity,
        expiry_date: CalendarDate,
    ) -> None:
        super().__init__(id, name, quantity)
        self._expiry_date = expiry_date

    @property
    def expiry_date(self) -> CalendarDate:
        return self._expiry_date

    def is_expired(self, today: CalendarDate) -> bool:
        """指定日時点で賞味期限切れかどうか"""
        return self._expiry_date.is_before(today)

    def to_dict(self) -> dict:
        return {**super().to_dict(), "expiry_date": str(self._expiry_date)}

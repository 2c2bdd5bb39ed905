from recordkeeper.shared.domain import CalendarDate, Quantity, RecordName

from .inventory_item import InventoryItem


class InventoryRecord(InventoryItem):
    """入庫記録（登録日付きの在庫レコード）"""

    def __init__(
        self,
        id: int,
        name: RecordName,
        quantity: Quantity,
        date_added: CalendarDate,
    ) -> None:
        super().__init__(id, name, quantity)
        self._date_added = date_added

    @property
    def date_added(self) -> CalendarDate:
        return self._date_added

    def to_dict(self) -> dict:
        return {**super().to_dict(), "date_added": str(self._date_added)}

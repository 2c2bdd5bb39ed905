from recordkeeper.shared.domain import InvalidValueException, Quantity, RecordName

from .inventory_item import InventoryItem


class ElectronicItem(InventoryItem):
    """電化製品の在庫品"""

    def __init__(
        self,
        id: int,
        name: RecordName,
        quantity: Quantity,
        brand: RecordName,
        warranty_months: int,
    ) -> None:
        super().__init__(id, name, quantity)
        if isinstance(warranty_months, bool) or not isinstance(warranty_months, int):
            raise InvalidValueException("Warranty months must be an integer")
        if warranty_months < 0:
            raise InvalidValueException("Warranty months cannot be negative")
        self._brand = brand
        self._warranty_months = warranty_months

    @property
    def brand(self) -> RecordName:
        return self._brand

    @property
    def warranty_months(self) -> int:
        return self._warranty_months

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "brand": str(self._brand),
            "warranty_months": self._warranty_months,
        }

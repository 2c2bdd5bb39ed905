from recordkeeper.shared.domain import Entity, InvalidValueException, Quantity, RecordName


class InventoryItem(Entity[int]):
    """在庫品エンティティの基底クラス

    数量以外のフィールドは生成後に変更できない。
    数量は change_quantity() でのみ更新する。
    """

    def __init__(self, id: int, name: RecordName, quantity: Quantity) -> None:
        if isinstance(id, bool) or not isinstance(id, int):
            raise InvalidValueException(f"Id must be an integer: {id!r}")
        super().__init__(id)
        self._name = name
        self._quantity = quantity

    @property
    def name(self) -> RecordName:
        return self._name

    @property
    def quantity(self) -> Quantity:
        return self._quantity

    def change_quantity(self, quantity: Quantity) -> None:
        """数量を置き換える"""
        self._quantity = quantity

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": str(self._name),
            "quantity": int(self._quantity),
        }

from typing import TypeVar

from recordkeeper.inventory.domain.entity import InventoryItem
from recordkeeper.shared.domain import KeyedRepository, Quantity

T = TypeVar("T", bound=InventoryItem)


class InventoryRepository(KeyedRepository[T]):
    """在庫品リポジトリ

    KeyedRepository に数量の部分更新を追加する。
    数量の更新は保持しているエンティティをその場で書き換える。
    """

    def update_quantity(self, id: int, new_quantity: int) -> None:
        """数量を new_quantity に更新する

        Raises:
            InvalidValueException: new_quantity が負の場合（存在確認より先に検証する）
            ResourceNotFoundException: id が登録されていない場合
        """
        quantity = Quantity(new_quantity)
        item = self._get_stored(id)
        item.change_quantity(quantity)

    def increase_quantity(self, id: int, amount: int) -> int:
        """数量を amount だけ増やし、更新後の数量を返す

        上限を超える場合は ArithmeticOverflowException となり、数量は変更されない。
        """
        item = self._get_stored(id)
        new_quantity = item.quantity.add(amount)
        item.change_quantity(new_quantity)
        return int(new_quantity)

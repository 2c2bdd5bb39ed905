from typing import Generic, TypeVar

from recordkeeper.inventory.domain.entity import InventoryItem
from recordkeeper.inventory.domain.repository import InventoryRepository

T = TypeVar("T", bound=InventoryItem)


class StockService(Generic[T]):
    """在庫操作のユースケース"""

    def __init__(self, repository: InventoryRepository[T]) -> None:
        self._repository = repository

    def list_items(self) -> list[T]:
        """全在庫品を登録順で返す"""
        return self._repository.get_all()

    def increase_stock(self, id: int, amount: int) -> T:
        """在庫を amount だけ増やし、更新後の在庫品を返す"""
        self._repository.increase_quantity(id, amount)
        return self._repository.get_by_id(id)

    def set_stock(self, id: int, quantity: int) -> T:
        """在庫数を quantity に設定する"""
        self._repository.update_quantity(id, quantity)
        return self._repository.get_by_id(id)

    def remove_item(self, id: int) -> None:
        """在庫品を削除する"""
        self._repository.remove(id)

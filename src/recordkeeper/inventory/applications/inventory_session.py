from typing import Generic, TypeVar

from recordkeeper.inventory.domain.entity import InventoryItem
from recordkeeper.inventory.domain.repository import InventoryRepository
from recordkeeper.shared.infrastructure import JsonFilePersistenceAdapter

T = TypeVar("T", bound=InventoryItem)


class InventorySessionService(Generic[T]):
    """在庫データの保存・復元のユースケース

    復元は既存のレコードを丸ごと置き換える（マージしない）。
    """

    def __init__(
        self,
        repository: InventoryRepository[T],
        persistence: JsonFilePersistenceAdapter[T],
    ) -> None:
        self._repository = repository
        self._persistence = persistence

    def save_session(self) -> int:
        """現在の全レコードを保存し、保存件数を返す"""
        records = self._repository.get_all()
        self._persistence.save(records)
        return len(records)

    def restore_session(self) -> int:
        """保存済みのレコードで置き換え、読み込み件数を返す"""
        records = self._persistence.load()
        self._repository.replace_all(records)
        return len(records)

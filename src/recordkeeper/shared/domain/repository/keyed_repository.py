import copy
from collections.abc import Callable, Iterable
from typing import TypeVar

from recordkeeper.shared.domain.exception import (
    DuplicateResourceException,
    InvalidValueException,
    ResourceNotFoundException,
)

from .repository import Repository

T = TypeVar("T")


def _entity_id(item) -> int:
    return item.id


class KeyedRepository(Repository[T, int]):
    """整数キーでレコードを管理するインメモリリポジトリ

    - キーは key_of(item) で取り出す（既定は item.id）
    - 登録順を保持する
    - 取得系は内部状態のディープコピーを返すため、呼び出し側の変更は反映されない
    """

    def __init__(self, key_of: Callable[[T], int] = _entity_id) -> None:
        self._key_of = key_of
        self._entries: dict[int, T] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, id: object) -> bool:
        return id in self._entries

    def exists(self, id: int) -> bool:
        """指定したキーが登録済みかどうか"""
        return id in self._entries

    def add(self, item: T) -> None:
        """レコードを登録する

        Raises:
            InvalidValueException: item が None の場合
            DuplicateResourceException: 同じキーが既に登録されている場合
        """
        if item is None:
            raise InvalidValueException("Item cannot be None")
        key = self._key_of(item)
        if key in self._entries:
            raise DuplicateResourceException(f"Item with Id {key} already exists.")
        self._entries[key] = copy.deepcopy(item)

    def get_by_id(self, id: int) -> T:
        """IDでレコードのコピーを取得する"""
        return copy.deepcopy(self._get_stored(id))

    def get_all(self) -> list[T]:
        """全レコードのスナップショットを登録順で返す"""
        return [copy.deepcopy(item) for item in self._entries.values()]

    def remove(self, id: int) -> None:
        """IDでレコードを削除する"""
        if id not in self._entries:
            raise ResourceNotFoundException(f"Cannot remove: item with Id {id} not found.")
        del self._entries[id]

    def replace_all(self, items: Iterable[T]) -> None:
        """全レコードを置き換える（マージはしない）

        items 内でキーが重複する場合は DuplicateResourceException とし、
        既存のレコードはそのまま残す。
        """
        entries: dict[int, T] = {}
        for item in items:
            if item is None:
                raise InvalidValueException("Item cannot be None")
            key = self._key_of(item)
            if key in entries:
                raise DuplicateResourceException(f"Item with Id {key} already exists.")
            entries[key] = copy.deepcopy(item)
        self._entries = entries

    def clear(self) -> None:
        """全レコードを破棄する"""
        self._entries.clear()

    def _get_stored(self, id: int) -> T:
        """内部で保持しているレコードそのものを返す（サブクラス向け）"""
        try:
            return self._entries[id]
        except KeyError:
            raise ResourceNotFoundException(f"Item with Id {id} not found.") from None

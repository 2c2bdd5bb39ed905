from abc import ABC, abstractmethod
from typing import Generic, TypeVar

ID = TypeVar("ID")


class Entity(ABC, Generic[ID]):
    """Entity 基底クラス

    - ID で同一性を判定する
    - フィールド単位の比較は to_dict() で行う
    """

    def __init__(self, id: ID) -> None:
        self._id = id

    @property
    def id(self) -> ID:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"

    @abstractmethod
    def to_dict(self) -> dict:
        """永続化用の辞書表現を返す"""
        raise NotImplementedError

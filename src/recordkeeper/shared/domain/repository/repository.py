from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - レコードの保持と取得を抽象化する
    - 失敗時は例外を送出し、状態を部分的に変更しない
    """

    @abstractmethod
    def add(self, item: T) -> None:
        """レコードを登録する"""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, id: ID) -> T:
        """IDでレコードを取得する"""
        raise NotImplementedError

    @abstractmethod
    def get_all(self) -> list[T]:
        """全レコードを取得する"""
        raise NotImplementedError

    @abstractmethod
    def remove(self, id: ID) -> None:
        """IDでレコードを削除する"""
        raise NotImplementedError

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Generic, Iterable, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from recordkeeper.shared.domain.exception import (
    DomainException,
    RecordFormatException,
    ResourceNotFoundException,
    StorageIOException,
)

T = TypeVar("T")


class JsonFilePersistenceAdapter(ABC, Generic[T]):
    """レコード列を JSON ファイルに保存・復元するアダプタ

    - 保持するのは保存先パスと書式（インデント幅）のみ
    - 保存は一時ファイルに書き込んでから置き換えるため、
      途中で失敗しても不完全なファイルが見えることはない
    - 読み込んだ行は record_model で検証してからエンティティに変換する
    """

    record_model: ClassVar[type[BaseModel]]

    def __init__(self, file_path: str | os.PathLike, indent: int = 2) -> None:
        self.file_path = Path(file_path)
        self.indent = indent

    @abstractmethod
    def _to_item(self, record: T) -> dict:
        """エンティティを永続化用の辞書に変換する"""
        raise NotImplementedError

    @abstractmethod
    def _to_entity(self, row: BaseModel) -> T:
        """検証済みの行をエンティティに変換する"""
        raise NotImplementedError

    def exists(self) -> bool:
        return self.file_path.exists()

    def save(self, records: Iterable[T]) -> None:
        """全レコードを保存先に書き出す（既存の内容は上書き）"""
        payload = json.dumps(
            [self._to_item(record) for record in records],
            ensure_ascii=False,
            indent=self.indent,
        )
        directory = self.file_path.parent
        tmp_path: str | None = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.file_path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.file_path)
            tmp_path = None
        except OSError as e:
            raise StorageIOException(
                f"I/O error while saving to {self.file_path}: {e}"
            ) from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

    def load(self) -> list[T]:
        """保存先からレコード列を読み込む（ファイル内の順序を保持）"""
        if not self.file_path.exists():
            raise ResourceNotFoundException(
                f"Data file not found: {self.file_path}"
            )
        try:
            with self.file_path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise ResourceNotFoundException(
                f"Data file not found: {self.file_path}"
            ) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RecordFormatException(
                f"Invalid file format (JSON) in {self.file_path}: {e}"
            ) from e
        except OSError as e:
            raise StorageIOException(
                f"I/O error while loading {self.file_path}: {e}"
            ) from e

        try:
            rows = TypeAdapter(list[self.record_model]).validate_python(raw)
            return [self._to_entity(row) for row in rows]
        except ValidationError as e:
            raise RecordFormatException(
                f"Unexpected record shape in {self.file_path}: {e}"
            ) from e
        except DomainException as e:
            raise RecordFormatException(
                f"Invalid record in {self.file_path}: {e}"
            ) from e

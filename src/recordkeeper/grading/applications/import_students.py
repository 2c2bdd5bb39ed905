import os

from recordkeeper.grading.domain import Student
from recordkeeper.grading.infrastructure import StudentFileReader
from recordkeeper.shared.domain import KeyedRepository


class ImportStudentsService:
    """成績ファイルの取り込みユースケース"""

    def __init__(self, repository: KeyedRepository[Student], reader: StudentFileReader) -> None:
        self._repository = repository
        self._reader = reader

    def import_from(self, file_path: str | os.PathLike) -> list[Student]:
        """ファイルの全行を読み込み、リポジトリの内容を置き換える

        ID が重複している場合は DuplicateResourceException となり、
        リポジトリは変更されない。
        """
        students = self._reader.read(file_path)
        self._repository.replace_all(students)
        return self._repository.get_all()

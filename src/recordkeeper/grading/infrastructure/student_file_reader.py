import os
from pathlib import Path

from recordkeeper.grading.domain import (
    InvalidScoreFormatException,
    MissingFieldException,
    Student,
)
from recordkeeper.shared.domain import (
    InvalidValueException,
    RecordName,
    ResourceNotFoundException,
    StorageIOException,
)

FIELDS = ("id", "full_name", "score")


class StudentFileReader:
    """Id,FullName,Score 形式のテキストファイルから学生を読み込む

    - 空行は読み飛ばす
    - 1 行でも不正な行があればファイル全体の読み込みを失敗させる
    - read() は呼び出しのたびにファイルを開き直す
    """

    def read(self, file_path: str | os.PathLike) -> list[Student]:
        path = Path(file_path)
        students: list[Student] = []
        try:
            with path.open("r", encoding="utf-8") as f:
                for line_number, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    students.append(self._parse_line(line, line_number))
        except FileNotFoundError as e:
            raise ResourceNotFoundException(f"Input file not found: {path}") from e
        except OSError as e:
            raise StorageIOException(f"I/O error while reading {path}: {e}") from e
        return students

    def _parse_line(self, line: str, line_number: int) -> Student:
        parts = line.rstrip("\r\n").split(",")
        if len(parts) < len(FIELDS):
            raise MissingFieldException(
                f"expected 3 fields (Id, FullName, Score) but got {len(parts)}.",
                line_number=line_number,
                field=FIELDS[len(parts)],
            )

        values = dict(zip(FIELDS, (p.strip() for p in parts)))
        for field, value in values.items():
            if not value:
                raise MissingFieldException(
                    f"field '{field}' is empty.", line_number=line_number, field=field
                )

        id = self._parse_int(values["id"], "id", line_number)
        score = self._parse_int(values["score"], "score", line_number)
        try:
            full_name = RecordName(values["full_name"])
        except InvalidValueException as e:
            raise MissingFieldException(
                str(e), line_number=line_number, field="full_name"
            ) from e
        try:
            return Student(id, full_name, score)
        except InvalidValueException as e:
            raise InvalidScoreFormatException(
                str(e), line_number=line_number, field="score"
            ) from e

    def _parse_int(self, raw: str, field: str, line_number: int) -> int:
        try:
            return int(raw)
        except ValueError:
            raise InvalidScoreFormatException(
                f"{field} '{raw}' is not a valid integer.",
                line_number=line_number,
                field=field,
            ) from None

import os

from recordkeeper.grading.applications import ImportStudentsService
from recordkeeper.grading.domain import RecordParseException, Student
from recordkeeper.grading.infrastructure import StudentFileReader
from recordkeeper.shared.domain import (
    DuplicateResourceException,
    KeyedRepository,
    PersistenceException,
    ResourceNotFoundException,
)
from recordkeeper.shared.utils import get_logger

logger = get_logger("grading")

DEFAULT_INPUT_PATH = "input.txt"


def run(input_path: str | os.PathLike | None = None) -> list[Student]:
    """成績ファイルを取り込み、取り込んだ学生の一覧を返す（失敗時は空リスト）"""
    input_path = input_path or os.getenv("GRADING_INPUT_PATH") or DEFAULT_INPUT_PATH
    repository: KeyedRepository[Student] = KeyedRepository()
    service = ImportStudentsService(repository, StudentFileReader())

    try:
        students = service.import_from(input_path)
    except ResourceNotFoundException as e:
        logger.error(f"Input file not found: {e}", extra={"path": str(input_path)})
        return []
    except RecordParseException as e:
        logger.error(
            str(e),
            extra={"path": str(input_path), "line_number": e.line_number, "field": e.field},
        )
        return []
    except (DuplicateResourceException, PersistenceException) as e:
        logger.error(str(e), extra={"path": str(input_path)})
        return []

    logger.info(f"Imported {len(students)} student(s)", extra={"path": str(input_path)})
    return students


if __name__ == "__main__":
    run()

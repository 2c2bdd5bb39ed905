import pytest

from recordkeeper.grading.applications import ImportStudentsService
from recordkeeper.grading.domain import MissingFieldException
from recordkeeper.grading.infrastructure import StudentFileReader
from recordkeeper.shared.domain import DuplicateResourceException, KeyedRepository


class TestImportStudentsService:
    def test_import_fills_repository(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_text("101,Alice Smith,84\n102,Bob Jones,67\n", encoding="utf-8")
        repository = KeyedRepository()

        students = ImportStudentsService(repository, StudentFileReader()).import_from(path)

        assert [s.id for s in students] == [101, 102]
        assert repository.get_by_id(102).score == 67

    def test_duplicate_ids_leave_repository_unchanged(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_text("101,Alice Smith,84\n101,Alice Again,90\n", encoding="utf-8")
        repository = KeyedRepository()

        with pytest.raises(DuplicateResourceException):
            ImportStudentsService(repository, StudentFileReader()).import_from(path)

        assert len(repository) == 0

    def test_parse_error_propagates(self, tmp_path, mock_repository):
        path = tmp_path / "input.txt"
        path.write_text("101,Alice Smith\n", encoding="utf-8")

        with pytest.raises(MissingFieldException):
            ImportStudentsService(mock_repository, StudentFileReader()).import_from(path)

        mock_repository.replace_all.assert_not_called()

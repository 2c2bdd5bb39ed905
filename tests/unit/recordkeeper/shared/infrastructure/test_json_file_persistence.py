import json
from datetime import date, timedelta
from unittest.mock import patch

import pytest

from recordkeeper.inventory.infrastructure import JsonInventoryRecordPersistence
from recordkeeper.shared.domain import (
    RecordFormatException,
    ResourceNotFoundException,
    StorageIOException,
)


class TestJsonFilePersistenceAdapter:
    @pytest.fixture
    def data_path(self, tmp_path):
        return tmp_path / "inventory.json"

    @pytest.fixture
    def persistence(self, data_path):
        return JsonInventoryRecordPersistence(data_path)

    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_round_trip(self, persistence, create_inventory_record, today, count):
        records = [
            create_inventory_record(
                id=i + 1,
                name=f"Item {i + 1}",
                quantity=i * 10,
                date_added=today - timedelta(days=i),
            )
            for i in range(count)
        ]

        persistence.save(records)
        loaded = persistence.load()

        assert [r.to_dict() for r in loaded] == [r.to_dict() for r in records]

    def test_saved_file_is_indented_json(self, persistence, data_path, create_inventory_record):
        persistence.save([create_inventory_record(id=1, date_added=date(2026, 10, 16))])

        text = data_path.read_text(encoding="utf-8")

        assert json.loads(text) == [
            {"id": 1, "name": "Dish Soap 750ml", "quantity": 24, "date_added": "2026-10-16"}
        ]
        assert '\n  {' in text

    def test_save_overwrites_existing_content(self, persistence, create_inventory_record):
        persistence.save([create_inventory_record(id=1), create_inventory_record(id=2)])
        persistence.save([create_inventory_record(id=3)])

        assert [r.id for r in persistence.load()] == [3]

    def test_save_leaves_no_temporary_file(self, persistence, tmp_path, create_inventory_record):
        persistence.save([create_inventory_record(id=1)])
        assert [p.name for p in tmp_path.iterdir()] == ["inventory.json"]

    def test_failed_save_keeps_previous_file(
        self, persistence, data_path, tmp_path, create_inventory_record
    ):
        persistence.save([create_inventory_record(id=1)])
        before = data_path.read_text(encoding="utf-8")

        with patch(
            "recordkeeper.shared.infrastructure.json_file_persistence.os.replace",
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(StorageIOException, match="I/O error while saving"):
                persistence.save([create_inventory_record(id=2)])

        assert data_path.read_text(encoding="utf-8") == before
        assert [p.name for p in tmp_path.iterdir()] == ["inventory.json"]

    def test_save_to_missing_directory_raises_io_error(self, tmp_path, create_inventory_record):
        persistence = JsonInventoryRecordPersistence(tmp_path / "missing" / "inventory.json")
        with pytest.raises(StorageIOException):
            persistence.save([create_inventory_record(id=1)])

    def test_load_missing_file_raises_not_found(self, persistence):
        assert not persistence.exists()
        with pytest.raises(ResourceNotFoundException, match="Data file not found"):
            persistence.load()

    def test_load_invalid_json_raises_format_error(self, persistence, data_path):
        data_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RecordFormatException, match="Invalid file format"):
            persistence.load()

    @pytest.mark.parametrize(
        "payload",
        [
            {"id": 1},
            [{"id": 1, "name": "Soap", "quantity": 1}],
            [{"id": "1", "name": "Soap", "quantity": 1, "date_added": "2026-10-16"}],
            [{"id": 1, "name": "Soap", "quantity": -1, "date_added": "2026-10-16"}],
            [{"id": 1, "name": "Soap", "quantity": 1, "date_added": "yesterday"}],
            [{"id": 1, "name": "   ", "quantity": 1, "date_added": "2026-10-16"}],
        ],
    )
    def test_load_unexpected_shape_raises_format_error(self, persistence, data_path, payload):
        data_path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(RecordFormatException):
            persistence.load()

    def test_load_read_failure_raises_io_error(self, persistence, data_path):
        data_path.write_text("[]", encoding="utf-8")
        with patch("pathlib.Path.open", side_effect=PermissionError("denied")):
            with pytest.raises(StorageIOException, match="I/O error while loading"):
                persistence.load()

    def test_data_path_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("INVENTORY_DATA_PATH", str(tmp_path / "env.json"))
        assert JsonInventoryRecordPersistence().file_path == tmp_path / "env.json"

    def test_load_blank_name_is_rejected_by_row_model(self, persistence, data_path):
        data_path.write_text(
            json.dumps(
                [{"id": 1, "name": "  ", "quantity": 1, "date_added": "2026-10-16"}]
            ),
            encoding="utf-8",
        )
        with pytest.raises(RecordFormatException, match="Unexpected record shape"):
            persistence.load()

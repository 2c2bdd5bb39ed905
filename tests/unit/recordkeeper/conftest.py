from datetime import date
from unittest.mock import MagicMock

import pytest

from recordkeeper.inventory.domain.entity import InventoryRecord
from recordkeeper.shared.domain import CalendarDate, Quantity, RecordName


@pytest.fixture
def today():
    """全テスト共通の基準日"""
    return date(2026, 10, 16)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_inventory_record(today):
    """InventoryRecord を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        id: int = 1,
        name: str = "Dish Soap 750ml",
        quantity: int = 24,
        date_added: date | None = None,
    ) -> InventoryRecord:
        return InventoryRecord(
            id=id,
            name=RecordName(name),
            quantity=Quantity(quantity),
            date_added=CalendarDate(date_added or today),
        )

    return _factory

from datetime import date, timedelta

import pytest

from recordkeeper.inventory.domain import (
    ElectronicItem,
    GroceryItem,
    InventoryItemFactory,
    InventoryRepository,
)


@pytest.fixture
def factory():
    return InventoryItemFactory()


@pytest.fixture
def create_grocery_item(factory, today):
    """GroceryItem を生成する Factory fixture"""

    def _factory(
        id: int = 201,
        name: str = "Rice",
        quantity: int = 50,
        expiry_date: date | None = None,
    ) -> GroceryItem:
        return factory.create_grocery(
            id,
            {
                "name": name,
                "quantity": quantity,
                "expiry_date": expiry_date or today + timedelta(days=30),
            },
        )

    return _factory


@pytest.fixture
def create_electronic_item(factory):
    """ElectronicItem を生成する Factory fixture"""

    def _factory(
        id: int = 101,
        name: str = "Smartphone",
        quantity: int = 20,
        brand: str = "TechOne",
        warranty_months: int = 24,
    ) -> ElectronicItem:
        return factory.create_electronic(
            id,
            {
                "name": name,
                "quantity": quantity,
                "brand": brand,
                "warranty_months": warranty_months,
            },
        )

    return _factory


@pytest.fixture
def grocery_repository(create_grocery_item):
    """Rice(201, 50) と Milk(202, 80) を登録済みのリポジトリ"""
    repository: InventoryRepository[GroceryItem] = InventoryRepository()
    repository.add(create_grocery_item(id=201, name="Rice", quantity=50))
    repository.add(create_grocery_item(id=202, name="Milk", quantity=80))
    return repository

import pytest

from recordkeeper.inventory.applications import StockService
from recordkeeper.shared.domain import (
    MAX_QUANTITY,
    ArithmeticOverflowException,
    Quantity,
    ResourceNotFoundException,
)


class TestStockService:
    def test_increase_stock_returns_updated_item(self, grocery_repository):
        service = StockService(grocery_repository)

        item = service.increase_stock(202, 15)

        assert item.quantity == Quantity(95)
        assert grocery_repository.get_by_id(202).quantity == Quantity(95)

    def test_increase_stock_overflow_propagates(self, grocery_repository):
        service = StockService(grocery_repository)
        service.set_stock(201, MAX_QUANTITY)

        with pytest.raises(ArithmeticOverflowException):
            service.increase_stock(201, 1)

        assert grocery_repository.get_by_id(201).quantity == Quantity(MAX_QUANTITY)

    def test_remove_item(self, grocery_repository):
        service = StockService(grocery_repository)

        service.remove_item(201)

        assert [item.id for item in service.list_items()] == [202]

    def test_remove_missing_item_propagates(self, grocery_repository):
        with pytest.raises(ResourceNotFoundException):
            StockService(grocery_repository).remove_item(999)

    def test_increase_stock_delegates_to_repository(self, mock_repository):
        service = StockService(mock_repository)

        service.increase_stock(103, 7)

        mock_repository.increase_quantity.assert_called_once_with(103, 7)
        mock_repository.get_by_id.assert_called_once_with(103)

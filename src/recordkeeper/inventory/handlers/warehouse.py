from datetime import date, timedelta

from recordkeeper.inventory.applications import StockService
from recordkeeper.inventory.domain import (
    ElectronicItem,
    GroceryItem,
    InventoryItemFactory,
    InventoryRepository,
)
from recordkeeper.inventory.handlers.response_models import (
    WarehouseSummary,
    to_item_data,
)
from recordkeeper.shared.domain import (
    ArithmeticOverflowException,
    CalendarDate,
    DuplicateResourceException,
    InvalidValueException,
    ResourceNotFoundException,
)
from recordkeeper.shared.utils import get_logger

logger = get_logger("warehouse")

RECOVERABLE_ERRORS = (
    DuplicateResourceException,
    ResourceNotFoundException,
    InvalidValueException,
    ArithmeticOverflowException,
)

SAMPLE_ELECTRONICS = [
    (101, "Smartphone", 20, "TechOne", 24),
    (102, "Laptop", 10, "NovaBook", 12),
    (103, "Headphones", 35, "SoundMax", 6),
]

# (id, name, quantity, 賞味期限までの月数, 日数)
SAMPLE_GROCERIES = [
    (201, "Rice (5kg)", 50, 8, 0),
    (202, "Milk (1L)", 80, 0, 30),
    (203, "Eggs (Tray)", 25, 0, 14),
]


def seed_data(
    electronics: InventoryRepository[ElectronicItem],
    groceries: InventoryRepository[GroceryItem],
    today: date,
) -> None:
    """サンプルの在庫品を登録する"""
    factory = InventoryItemFactory()
    for id, name, quantity, brand, warranty_months in SAMPLE_ELECTRONICS:
        electronics.add(
            factory.create_electronic(
                id,
                {
                    "name": name,
                    "quantity": quantity,
                    "brand": brand,
                    "warranty_months": warranty_months,
                },
            )
        )
    for id, name, quantity, shelf_months, shelf_days in SAMPLE_GROCERIES:
        expiry_date = CalendarDate(today).add_months(shelf_months).value
        groceries.add(
            factory.create_grocery(
                id,
                {
                    "name": name,
                    "quantity": quantity,
                    "expiry_date": expiry_date + timedelta(days=shelf_days),
                },
            )
        )


def increase_stock(
    service: StockService, id: int, amount: int, warnings: list[str]
) -> bool:
    """在庫を増やす。記録単位のエラーは警告ログを出して処理を続ける"""
    try:
        item = service.increase_stock(id, amount)
    except RECOVERABLE_ERRORS as e:
        logger.warning(
            f"Stock update skipped: {e}", extra={"item_id": id, "amount": amount}
        )
        warnings.append(str(e))
        return False
    logger.info(
        "Stock updated",
        extra={
            "item_id": id,
            "item_name": str(item.name),
            "quantity": int(item.quantity),
        },
    )
    return True


def remove_item(service: StockService, id: int, warnings: list[str]) -> bool:
    """在庫品を削除する。見つからない場合は警告ログを出して処理を続ける"""
    try:
        service.remove_item(id)
    except ResourceNotFoundException as e:
        logger.warning(str(e), extra={"item_id": id})
        warnings.append(str(e))
        return False
    logger.info("Removed item", extra={"item_id": id})
    return True


def run(today: date | None = None) -> dict:
    """倉庫在庫のサンプル処理を実行する"""
    today = today or date.today()
    electronics: InventoryRepository[ElectronicItem] = InventoryRepository()
    groceries: InventoryRepository[GroceryItem] = InventoryRepository()
    electronic_service = StockService(electronics)
    grocery_service = StockService(groceries)
    warnings: list[str] = []

    seed_data(electronics, groceries, today)
    for item in grocery_service.list_items() + electronic_service.list_items():
        logger.info("Inventory item", extra={"item": item.to_dict()})

    increase_stock(grocery_service, 202, 15, warnings)
    increase_stock(electronic_service, 103, 7, warnings)

    # 異常系のデモ
    try:
        groceries.add(
            InventoryItemFactory().create_grocery(
                201,
                {
                    "name": "Rice (5kg) - Duplicate",
                    "quantity": 10,
                    "expiry_date": today + timedelta(days=180),
                },
            )
        )
    except DuplicateResourceException as e:
        logger.warning(str(e), extra={"item_id": 201})
        warnings.append(str(e))

    remove_item(electronic_service, 999, warnings)

    try:
        grocery_service.set_stock(202, -5)
    except (InvalidValueException, ResourceNotFoundException) as e:
        logger.warning(str(e), extra={"item_id": 202})
        warnings.append(str(e))

    return WarehouseSummary(
        groceries=[to_item_data(item) for item in grocery_service.list_items()],
        electronics=[to_item_data(item) for item in electronic_service.list_items()],
        warnings=warnings,
    ).model_dump()


if __name__ == "__main__":
    run()

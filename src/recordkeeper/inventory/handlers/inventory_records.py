import os
from datetime import date, timedelta

from recordkeeper.inventory.applications import InventorySessionService
from recordkeeper.inventory.domain import (
    InventoryItemFactory,
    InventoryRecord,
    InventoryRepository,
)
from recordkeeper.inventory.handlers.response_models import (
    ErrorResponse,
    SuccessResponse,
    to_item_data,
)
from recordkeeper.inventory.infrastructure import JsonInventoryRecordPersistence
from recordkeeper.shared.domain import (
    DuplicateResourceException,
    PersistenceException,
    ResourceNotFoundException,
)
from recordkeeper.shared.utils import get_logger

logger = get_logger("inventory-records")

SAMPLE_RECORDS = [
    (1, "Dish Soap 750ml", 24, 0),
    (2, "Floor Cleaner 1L", 12, 1),
    (3, "Bleach 500ml", 30, 3),
    (4, "Sponge Pack (5x)", 18, 7),
    (5, "Air Freshener 300ml", 10, 10),
]


def seed_sample_data(repository: InventoryRepository[InventoryRecord], today: date) -> None:
    """サンプルの入庫記録を登録する"""
    factory = InventoryItemFactory()
    for id, name, quantity, days_ago in SAMPLE_RECORDS:
        repository.add(
            factory.create_record(
                id,
                {
                    "name": name,
                    "quantity": quantity,
                    "date_added": today - timedelta(days=days_ago),
                },
            )
        )


def run(data_path: str | os.PathLike | None = None, today: date | None = None) -> dict:
    """入庫記録を保存し、新しいセッションで読み込み直す"""
    today = today or date.today()
    persistence = JsonInventoryRecordPersistence(data_path)

    repository: InventoryRepository[InventoryRecord] = InventoryRepository()
    seed_sample_data(repository, today)
    session = InventorySessionService(repository, persistence)
    try:
        saved = session.save_session()
    except PersistenceException as e:
        logger.error(f"Save failed: {e}", extra={"path": str(persistence.file_path)})
        return ErrorResponse(message=str(e)).model_dump()
    logger.info(f"Saved {saved} item(s)", extra={"path": str(persistence.file_path)})

    # 新しいセッションを模してリポジトリを作り直す
    restored: InventoryRepository[InventoryRecord] = InventoryRepository()
    session = InventorySessionService(restored, persistence)
    try:
        loaded = session.restore_session()
    except (PersistenceException, ResourceNotFoundException, DuplicateResourceException) as e:
        logger.error(f"Load failed: {e}", extra={"path": str(persistence.file_path)})
        return ErrorResponse(message=str(e)).model_dump()
    logger.info(f"Loaded {loaded} item(s)", extra={"path": str(persistence.file_path)})

    return SuccessResponse(data=[to_item_data(r) for r in restored.get_all()]).model_dump()


if __name__ == "__main__":
    run()

from __future__ import annotations

from pydantic import BaseModel

from recordkeeper.inventory.domain.entity import InventoryItem


class InventoryItemData(BaseModel):
    """在庫品データのレスポンスモデル

    種別ごとの追加フィールド（brand, expiry_date など）は attributes に入る。
    """

    id: int
    name: str
    quantity: int
    attributes: dict[str, str | int] = {}


class WarehouseSummary(BaseModel):
    """倉庫処理の結果モデル"""

    status: str = "success"
    groceries: list[InventoryItemData]
    electronics: list[InventoryItemData]
    warnings: list[str] = []


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: list[InventoryItemData]


class ErrorResponse(BaseModel):
    """失敗レスポンスモデル"""

    status: str = "error"
    message: str


def to_item_data(item: InventoryItem) -> InventoryItemData:
    """InventoryItem エンティティをレスポンスモデルに変換する"""
    fields = item.to_dict()
    return InventoryItemData(
        id=fields.pop("id"),
        name=fields.pop("name"),
        quantity=fields.pop("quantity"),
        attributes=fields,
    )

"""Inventory Schemas — stock items, stock adjustments and derived stock badges.

Invariants:
    - quantity, min_stock and max_stock lie in 0..MAX_QUANTITY
    - max_stock, when given, is not below min_stock
    - StockAdjustment.operation is one of set/add/subtract
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from mentorship.core.domain_types import StockOperation, StockStatus
from mentorship.core.line_items import MAX_QUANTITY
from mentorship.schemas.common import BadgeResponse, ORMResponse, require_text


class InventoryCreate(BaseModel):
    item_name: str = Field(max_length=200)
    category: str = Field(max_length=100)
    quantity: int = Field(0, ge=0, le=MAX_QUANTITY)
    min_stock: int = Field(5, ge=0, le=MAX_QUANTITY)
    max_stock: int | None = Field(None, ge=0, le=MAX_QUANTITY)
    unit_price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    description: str | None = Field(None, max_length=5000)
    supplier: str | None = Field(None, max_length=200)
    location: str | None = Field(None, max_length=200)
    sku: str | None = Field(None, max_length=50)

    @field_validator("item_name", "category")
    @classmethod
    def check_text(cls, v: str) -> str:
        return require_text(v)

    @model_validator(mode="after")
    def check_thresholds(self):
        if self.max_stock is not None and self.max_stock < self.min_stock:
            raise ValueError("max_stock cannot be below min_stock")
        return self


class InventoryUpdate(BaseModel):
    """Partial update; thresholds are re-checked against the stored row."""
    item_name: str | None = Field(None, max_length=200)
    category: str | None = Field(None, max_length=100)
    quantity: int | None = Field(None, ge=0, le=MAX_QUANTITY)
    min_stock: int | None = Field(None, ge=0, le=MAX_QUANTITY)
    max_stock: int | None = Field(None, ge=0, le=MAX_QUANTITY)
    unit_price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    description: str | None = Field(None, max_length=5000)
    supplier: str | None = Field(None, max_length=200)
    location: str | None = Field(None, max_length=200)
    sku: str | None = Field(None, max_length=50)

    @field_validator("item_name", "category")
    @classmethod
    def check_text(cls, v: str | None) -> str | None:
        return None if v is None else require_text(v)


class StockAdjustment(BaseModel):
    quantity: int = Field(ge=0, le=MAX_QUANTITY)
    operation: StockOperation


class InventoryResponse(ORMResponse):
    id: UUID
    item_name: str
    category: str
    quantity: int
    min_stock: int
    max_stock: int | None
    unit_price: float | None
    description: str | None
    supplier: str | None
    location: str | None
    sku: str
    is_active: bool
    stock_status: StockStatus
    badge: BadgeResponse | None = None
    created_at: datetime

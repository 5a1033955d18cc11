"""Inventory — stocked items, stock adjustments and soft deletion.

Invariants:
    - Listings and lookups only see active items (is_active = True)
    - low_stock filter: quantity <= min_stock
    - Stock "subtract" floors at zero; "add" may not push stock past MAX_QUANTITY
    - SKU defaults to "SKU-<epoch ms>"; duplicate SKUs → 409 (create and update)
    - PUT re-checks max_stock >= min_stock against the merged row
    - Every item carries its derived stock status and badge (entity "stock")
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorship.api.routes.query_helpers import (
    generated_number, get_or_404, paginate,
)
from mentorship.core.domain_types import EntityType, StockOperation
from mentorship.core.errors import (
    BusinessRuleError, ConflictError, FieldValidationError, ResourceNotFoundError,
)
from mentorship.core.line_items import MAX_QUANTITY
from mentorship.core.status_classifier import describe_status
from mentorship.infrastructure.database import get_db
from mentorship.models.inventory_item import InventoryItem
from mentorship.schemas.common import BadgeResponse
from mentorship.schemas.inventory import (
    InventoryCreate, InventoryResponse, InventoryUpdate, StockAdjustment,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/inventory", tags=["inventory"])

# Optional columns an update may clear by sending null
_NULLABLE_COLUMNS = frozenset({
    "max_stock", "unit_price", "description", "supplier", "location",
})


def to_inventory_response(item: InventoryItem) -> InventoryResponse:
    response = InventoryResponse.model_validate(item)
    response.badge = BadgeResponse.from_badge(
        describe_status(EntityType.STOCK, item.stock_status),
    )
    return response


def adjust_quantity(current: int, adjustment: StockAdjustment) -> int:
    if adjustment.operation is StockOperation.ADD:
        total = current + adjustment.quantity
        if total > MAX_QUANTITY:
            raise BusinessRuleError(
                f"Stock cannot exceed {MAX_QUANTITY} units", "max_quantity",
            )
        return total
    if adjustment.operation is StockOperation.SUBTRACT:
        return max(0, current - adjustment.quantity)
    return adjustment.quantity


async def _get_active_item(db: AsyncSession, item_id: UUID) -> InventoryItem:
    item = await get_or_404(db, InventoryItem, item_id, "Inventory item")
    if not item.is_active:
        raise ResourceNotFoundError("Inventory item", str(item_id))
    return item


async def _ensure_sku_free(
    db: AsyncSession, sku: str, exclude_id: UUID | None = None,
) -> None:
    query = select(InventoryItem.id).where(InventoryItem.sku == sku)
    if exclude_id is not None:
        query = query.where(InventoryItem.id != exclude_id)
    if await db.scalar(query):
        raise ConflictError(f"SKU '{sku}' is already in use")


@router.get("")
async def list_inventory(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    category: str | None = Query(None, max_length=100),
    low_stock: bool = False,
    search: str | None = Query(None, max_length=200),
    db: AsyncSession = Depends(get_db),
):
    query = (
        select(InventoryItem)
        .where(InventoryItem.is_active.is_(True))
        .order_by(InventoryItem.item_name)
    )
    if category:
        query = query.where(InventoryItem.category == category)
    if low_stock:
        query = query.where(InventoryItem.quantity <= InventoryItem.min_stock)
    if search:
        pattern = f"%{search.strip()}%"
        query = query.where(or_(
            InventoryItem.item_name.ilike(pattern),
            InventoryItem.description.ilike(pattern),
            InventoryItem.sku.ilike(pattern),
        ))
    items, page_info = await paginate(db, query, page, limit)
    return {
        "inventory": [to_inventory_response(i) for i in items],
        **page_info,
    }


@router.get("/{item_id}", response_model=InventoryResponse)
async def get_inventory_item(item_id: UUID, db: AsyncSession = Depends(get_db)):
    return to_inventory_response(await _get_active_item(db, item_id))


@router.post(
    "", response_model=InventoryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_inventory_item(
    body: InventoryCreate, db: AsyncSession = Depends(get_db),
):
    data = body.model_dump()
    if data["sku"]:
        await _ensure_sku_free(db, data["sku"])
    else:
        data["sku"] = await generated_number(db, InventoryItem.sku, "SKU")

    item = InventoryItem(**data)
    db.add(item)
    await db.commit()
    logger.info(
        f"Inventory item {item.sku} created",
        extra={"entity_type": "inventory", "resource_id": str(item.id)},
    )
    return to_inventory_response(item)


@router.put("/{item_id}", response_model=InventoryResponse)
async def update_inventory_item(
    item_id: UUID, body: InventoryUpdate, db: AsyncSession = Depends(get_db),
):
    item = await _get_active_item(db, item_id)
    changes = body.model_dump(exclude_unset=True)
    changes = {
        k: v for k, v in changes.items()
        if v is not None or k in _NULLABLE_COLUMNS
    }
    if changes.get("sku"):
        await _ensure_sku_free(db, changes["sku"], exclude_id=item_id)
    elif "sku" in changes:
        del changes["sku"]

    for key, value in changes.items():
        setattr(item, key, value)
    if item.max_stock is not None and item.max_stock < item.min_stock:
        raise FieldValidationError("max_stock cannot be below min_stock", "max_stock")
    await db.commit()
    logger.info(
        f"Inventory item {item.sku} updated",
        extra={"entity_type": "inventory", "resource_id": str(item_id)},
    )
    return to_inventory_response(await _get_active_item(db, item_id))


@router.patch("/{item_id}/stock", response_model=InventoryResponse)
async def update_stock(
    item_id: UUID, body: StockAdjustment, db: AsyncSession = Depends(get_db),
):
    item = await _get_active_item(db, item_id)
    previous = item.quantity
    item.quantity = adjust_quantity(previous, body)
    await db.commit()
    logger.info(
        f"Stock {body.operation.value} on {item.sku}: {previous} -> {item.quantity}",
        extra={"entity_type": "inventory", "resource_id": str(item_id)},
    )
    return to_inventory_response(item)


@router.delete("/{item_id}")
async def delete_inventory_item(item_id: UUID, db: AsyncSession = Depends(get_db)):
    """Soft delete: the row stays, listings stop showing it."""
    item = await _get_active_item(db, item_id)
    item.is_active = False
    await db.commit()
    return {"message": "Inventory item deleted successfully"}

"""Global Search — case-insensitive lookup across every directory at once.

Invariants:
    - q is required; missing or blank → 400 (FieldValidationError on "q")
    - At most SEARCH_LIMIT matches per entity kind
    - Every hit is the entity's normal response body plus a "type" tag
    - Soft-deleted inventory items are not searchable
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorship.api.routes.inventory import to_inventory_response
from mentorship.api.routes.invoices import to_invoice_response
from mentorship.api.routes.mentees import to_mentee_response
from mentorship.api.routes.receipts import to_receipt_response
from mentorship.core.errors import FieldValidationError
from mentorship.infrastructure.database import get_db
from mentorship.models.document import Document
from mentorship.models.inventory_item import InventoryItem
from mentorship.models.invoice import Invoice
from mentorship.models.mentee import Mentee
from mentorship.models.receipt import Receipt
from mentorship.models.staff import Staff
from mentorship.schemas.document import DocumentResponse
from mentorship.schemas.people import StaffResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/search", tags=["search"])

SEARCH_LIMIT = 10

# (type tag, model, searched columns, response builder)
_TARGETS = (
    ("mentee", Mentee,
     (Mentee.first_name, Mentee.last_name, Mentee.email),
     to_mentee_response),
    ("staff", Staff,
     (Staff.first_name, Staff.last_name, Staff.email),
     StaffResponse.model_validate),
    ("document", Document,
     (Document.title,),
     DocumentResponse.model_validate),
    ("invoice", Invoice,
     (Invoice.invoice_number, Invoice.vendor, Invoice.description),
     to_invoice_response),
    ("receipt", Receipt,
     (Receipt.receipt_number, Receipt.vendor, Receipt.category, Receipt.description),
     to_receipt_response),
    ("inventory", InventoryItem,
     (InventoryItem.item_name, InventoryItem.description, InventoryItem.category,
      InventoryItem.supplier, InventoryItem.sku),
     to_inventory_response),
)


@router.get("")
async def global_search(
    q: str | None = Query(None, max_length=200),
    db: AsyncSession = Depends(get_db),
):
    if q is None or not q.strip():
        raise FieldValidationError("Search query is required", "q")
    pattern = f"%{q.strip()}%"

    results = []
    for type_tag, model, columns, to_response in _TARGETS:
        query = select(model).where(or_(*(column.ilike(pattern) for column in columns)))
        if model is InventoryItem:
            query = query.where(InventoryItem.is_active.is_(True))
        for row in (await db.scalars(query.limit(SEARCH_LIMIT))).all():
            results.append({
                **to_response(row).model_dump(mode="json"),
                "type": type_tag,
            })
    logger.debug(f"Search {q!r}: {len(results)} hits")
    return results

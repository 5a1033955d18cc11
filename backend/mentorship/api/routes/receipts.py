"""Receipts — expense receipts with line items, VAT totals and approval.

Invariants:
    - receipt_number generated as "RCP-<epoch ms>"
    - subtotal/vat/total computed from line items at the configured VAT rate
    - New receipts are "pending"; PATCH /{id}/status accepts only approved/rejected
    - A filename, when given, must carry a receipt extension (pdf/jpg/jpeg/png)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorship.api.routes.query_helpers import (
    generated_number, get_or_404, paginate,
)
from mentorship.config import get_settings
from mentorship.core.constants import get_registry
from mentorship.core.domain_types import EntityType, ReceiptStatus
from mentorship.core.errors import FieldValidationError
from mentorship.core.line_items import summarize_line_items
from mentorship.core.status_classifier import describe_status
from mentorship.core.validators import has_allowed_extension
from mentorship.infrastructure.database import get_db
from mentorship.models.line_item import ReceiptItem
from mentorship.models.receipt import Receipt
from mentorship.schemas.common import BadgeResponse
from mentorship.schemas.finance import (
    ReceiptCreate, ReceiptResponse, ReceiptStatusUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/receipts", tags=["receipts"])


def to_receipt_response(receipt: Receipt) -> ReceiptResponse:
    response = ReceiptResponse.model_validate(receipt)
    response.badge = BadgeResponse.from_badge(
        describe_status(EntityType.RECEIPT, receipt.status),
    )
    return response


@router.get("")
async def list_receipts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status_filter: ReceiptStatus | None = Query(None, alias="status"),
    category: str | None = Query(None, max_length=100),
    db: AsyncSession = Depends(get_db),
):
    query = select(Receipt).order_by(Receipt.receipt_date.desc(), Receipt.created_at.desc())
    if status_filter:
        query = query.where(Receipt.status == status_filter.value)
    if category:
        query = query.where(Receipt.category == category)
    receipts, page_info = await paginate(db, query, page, limit)
    return {
        "receipts": [to_receipt_response(r) for r in receipts],
        **page_info,
    }


@router.post(
    "", response_model=ReceiptResponse, status_code=status.HTTP_201_CREATED,
)
async def create_receipt(body: ReceiptCreate, db: AsyncSession = Depends(get_db)):
    if body.filename and not has_allowed_extension(
        body.filename, get_registry().file_extensions["receipts"],
    ):
        raise FieldValidationError(
            "Only PDF, JPG and PNG receipts are allowed", "filename",
        )

    totals = summarize_line_items(body.line_items, get_settings().vat_rate)
    receipt = Receipt(
        receipt_number=await generated_number(db, Receipt.receipt_number, "RCP"),
        vendor=body.vendor,
        receipt_date=body.receipt_date,
        subtotal=totals.subtotal,
        vat=totals.vat,
        total=totals.total,
        category=body.category,
        description=body.description,
        filename=body.filename,
        status=ReceiptStatus.PENDING.value,
        line_items=[ReceiptItem(**item.model_dump()) for item in body.line_items],
    )
    db.add(receipt)
    await db.commit()
    logger.info(
        f"Receipt {receipt.receipt_number} created",
        extra={"entity_type": "receipt", "resource_id": str(receipt.id)},
    )
    return to_receipt_response(await get_or_404(db, Receipt, receipt.id, "Receipt"))


@router.patch("/{receipt_id}/status", response_model=ReceiptResponse)
async def update_receipt_status(
    receipt_id: UUID,
    body: ReceiptStatusUpdate,
    db: AsyncSession = Depends(get_db),
):
    receipt = await get_or_404(db, Receipt, receipt_id, "Receipt")
    receipt.status = body.status
    await db.commit()
    logger.info(
        f"Receipt {receipt.receipt_number} {body.status}",
        extra={"entity_type": "receipt", "resource_id": str(receipt_id)},
    )
    return to_receipt_response(await get_or_404(db, Receipt, receipt_id, "Receipt"))

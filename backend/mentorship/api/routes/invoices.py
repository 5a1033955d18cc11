"""Invoices — vendor invoices with optional line items and payment recording.

Invariants:
    - invoice_number generated as "INV-<epoch ms>"
    - With line items, amount is their subtotal (VAT is not added to invoices)
    - PATCH /{id}/pay sets status "paid", paid_date (default today) and payment method
    - Every invoice response embeds its status badge (classifier, entity "invoice")
"""

import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorship.api.routes.query_helpers import (
    generated_number, get_or_404, paginate,
)
from mentorship.core.domain_types import EntityType, InvoiceStatus
from mentorship.core.line_items import summarize_line_items, to_money
from mentorship.core.status_classifier import describe_status
from mentorship.infrastructure.database import get_db
from mentorship.models.invoice import Invoice
from mentorship.models.line_item import InvoiceItem
from mentorship.schemas.common import BadgeResponse
from mentorship.schemas.finance import InvoiceCreate, InvoicePayment, InvoiceResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


def to_invoice_response(invoice: Invoice) -> InvoiceResponse:
    response = InvoiceResponse.model_validate(invoice)
    response.badge = BadgeResponse.from_badge(
        describe_status(EntityType.INVOICE, invoice.status),
    )
    return response


@router.get("")
async def list_invoices(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status_filter: InvoiceStatus | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    query = select(Invoice).order_by(Invoice.issue_date.desc(), Invoice.created_at.desc())
    if status_filter:
        query = query.where(Invoice.status == status_filter.value)
    invoices, page_info = await paginate(db, query, page, limit)
    return {
        "invoices": [to_invoice_response(i) for i in invoices],
        **page_info,
    }


@router.post(
    "", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED,
)
async def create_invoice(body: InvoiceCreate, db: AsyncSession = Depends(get_db)):
    if body.line_items:
        amount = summarize_line_items(body.line_items, vat_rate=0).subtotal
    else:
        amount = to_money(body.amount)

    invoice = Invoice(
        invoice_number=await generated_number(db, Invoice.invoice_number, "INV"),
        vendor=body.vendor,
        amount=amount,
        issue_date=body.issue_date,
        due_date=body.due_date,
        status=InvoiceStatus.PENDING.value,
        description=body.description,
        notes=body.notes,
        line_items=[InvoiceItem(**item.model_dump()) for item in body.line_items],
    )
    db.add(invoice)
    await db.commit()
    logger.info(
        f"Invoice {invoice.invoice_number} created",
        extra={"entity_type": "invoice", "resource_id": str(invoice.id)},
    )
    return to_invoice_response(await get_or_404(db, Invoice, invoice.id, "Invoice"))


@router.patch("/{invoice_id}/pay", response_model=InvoiceResponse)
async def pay_invoice(
    invoice_id: UUID,
    body: InvoicePayment | None = None,
    db: AsyncSession = Depends(get_db),
):
    invoice = await get_or_404(db, Invoice, invoice_id, "Invoice")
    body = body or InvoicePayment()
    invoice.status = InvoiceStatus.PAID.value
    invoice.paid_date = body.paid_date or date.today()
    invoice.payment_method = body.payment_method
    await db.commit()
    logger.info(
        f"Invoice {invoice.invoice_number} paid",
        extra={"entity_type": "invoice", "resource_id": str(invoice.id)},
    )
    return to_invoice_response(await get_or_404(db, Invoice, invoice_id, "Invoice"))

"""Dashboard — headline counts and recent activity for the admin home page.

Invariants:
    - Counts mirror the list filters: active staff, pending invoices/receipts,
      active items at or below min_stock
    - recent_activity holds at most five entries per list, newest first
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorship.core.domain_types import InvoiceStatus, ReceiptStatus
from mentorship.infrastructure.database import get_db
from mentorship.models.document import Document
from mentorship.models.inventory_item import InventoryItem
from mentorship.models.invoice import Invoice
from mentorship.models.mentee import Mentee
from mentorship.models.receipt import Receipt
from mentorship.models.staff import Staff

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])

RECENT_LIMIT = 5


async def _count(db: AsyncSession, model, *conditions) -> int:
    query = select(func.count()).select_from(model)
    if conditions:
        query = query.where(*conditions)
    return await db.scalar(query) or 0


@router.get("/stats")
async def dashboard_stats(db: AsyncSession = Depends(get_db)):
    stats = {
        "total_staff": await _count(db, Staff, Staff.is_active.is_(True)),
        "total_mentees": await _count(db, Mentee),
        "pending_invoices": await _count(
            db, Invoice, Invoice.status == InvoiceStatus.PENDING.value,
        ),
        "low_stock_items": await _count(
            db, InventoryItem,
            InventoryItem.is_active.is_(True),
            InventoryItem.quantity <= InventoryItem.min_stock,
        ),
        "pending_receipts": await _count(
            db, Receipt, Receipt.status == ReceiptStatus.PENDING.value,
        ),
        "total_documents": await _count(db, Document),
    }

    mentees = await db.scalars(
        select(Mentee).order_by(Mentee.created_at.desc()).limit(RECENT_LIMIT),
    )
    documents = await db.scalars(
        select(Document).order_by(Document.created_at.desc()).limit(RECENT_LIMIT),
    )
    invoices = await db.scalars(
        select(Invoice)
        .where(Invoice.status == InvoiceStatus.PENDING.value)
        .order_by(Invoice.issue_date.desc())
        .limit(RECENT_LIMIT),
    )
    return {
        "stats": stats,
        "recent_activity": {
            "new_mentees": [
                {
                    "first_name": m.first_name,
                    "last_name": m.last_name,
                    "mentor": (
                        f"{m.mentor.first_name} {m.mentor.last_name}"
                        if m.mentor else None
                    ),
                    "created_at": m.created_at.isoformat(),
                }
                for m in mentees
            ],
            "new_documents": [
                {"title": d.title, "created_at": d.created_at.isoformat()}
                for d in documents
            ],
            "pending_invoices": [
                {
                    "vendor": i.vendor,
                    "amount": float(i.amount),
                    "issue_date": i.issue_date.isoformat(),
                }
                for i in invoices
            ],
        },
    }

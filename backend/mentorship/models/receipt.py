"""Receipt ORM — expense receipts awaiting approval.

Invariants:
    - receipt_number unique, "RCP-<epoch ms>" when generated
    - total = subtotal + vat, all cents-rounded (core/line_items.py)
    - status is a ReceiptStatus value; only approved/rejected may be set after creation
"""

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mentorship.db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Receipt(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "receipts"

    receipt_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    vendor: Mapped[str] = mapped_column(String(200), nullable=False)
    receipt_date: Mapped[date] = mapped_column(Date, nullable=False)
    subtotal: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    vat: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    uploaded_by: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    line_items: Mapped[list["ReceiptItem"]] = relationship(
        "ReceiptItem", back_populates="receipt",
        cascade="all, delete-orphan", lazy="selectin",
    )

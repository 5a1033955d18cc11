"""Line Item ORM — invoice and receipt rows sharing one column layout.

Invariants:
    - description non-empty, quantity >= 0, unit_price >= 0 (checked at the API boundary)
    - Rows are owned by their parent and deleted with it (FK ON DELETE CASCADE)

Design Decisions:
    - LineItemColumns mixin holds the shared columns; the two tables differ only
      in their parent foreign key
"""

import uuid
from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mentorship.core.line_items import line_total as compute_line_total
from mentorship.db.base import Base, UUIDPrimaryKeyMixin


class LineItemColumns(UUIDPrimaryKeyMixin):
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    @property
    def line_total(self) -> Decimal:
        return compute_line_total(self.quantity, self.unit_price)


class InvoiceItem(LineItemColumns, Base):
    __tablename__ = "invoice_items"

    invoice_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("invoices.id", ondelete="CASCADE"),
        nullable=False,
    )
    invoice: Mapped["Invoice"] = relationship("Invoice", back_populates="line_items")


class ReceiptItem(LineItemColumns, Base):
    __tablename__ = "receipt_items"

    receipt_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("receipts.id", ondelete="CASCADE"),
        nullable=False,
    )
    receipt: Mapped["Receipt"] = relationship("Receipt", back_populates="line_items")

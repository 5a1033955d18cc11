"""Inventory ORM — stocked items with min/max thresholds.

Invariants:
    - sku unique, "SKU-<epoch ms>" when not supplied
    - quantity >= 0 (subtract operations floor at zero)
    - is_active False means soft-deleted; listings exclude it
    - stock status is derived (core/status_classifier.derive_stock_status), never stored
"""

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mentorship.core.domain_types import StockStatus
from mentorship.core.status_classifier import derive_stock_status
from mentorship.db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class InventoryItem(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "inventory"

    item_name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    min_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    max_stock: Mapped[int | None] = mapped_column(Integer, nullable=True)
    unit_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    supplier: Mapped[str | None] = mapped_column(String(200), nullable=True)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    sku: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    @property
    def stock_status(self) -> StockStatus:
        return derive_stock_status(self.quantity, self.min_stock, self.max_stock)

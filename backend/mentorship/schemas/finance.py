"""Finance Schemas — invoices, receipts and their line items.

Invariants:
    - LineItemIn: description required, 0 <= quantity <= MAX_QUANTITY, unit_price >= 0
    - InvoiceCreate: amount required unless line items are given (then derived)
    - due_date is not before issue_date
    - ReceiptStatusUpdate only accepts "approved" or "rejected"
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from mentorship.core.line_items import MAX_QUANTITY
from mentorship.schemas.common import BadgeResponse, ORMResponse, require_text


class LineItemIn(BaseModel):
    description: str = Field(max_length=255)
    quantity: int = Field(ge=0, le=MAX_QUANTITY)
    unit_price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    @field_validator("description")
    @classmethod
    def check_description(cls, v: str) -> str:
        return require_text(v)


class LineItemResponse(ORMResponse):
    id: UUID
    description: str
    quantity: int
    unit_price: float
    line_total: float


class InvoiceCreate(BaseModel):
    vendor: str = Field(max_length=200)
    amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    issue_date: date
    due_date: date
    description: str | None = Field(None, max_length=5000)
    notes: str | None = Field(None, max_length=5000)
    line_items: list[LineItemIn] = Field(default_factory=list)

    @field_validator("vendor")
    @classmethod
    def check_vendor(cls, v: str) -> str:
        return require_text(v)

    @model_validator(mode="after")
    def check_amount_and_dates(self):
        if self.amount is None and not self.line_items:
            raise ValueError("amount is required when no line items are given")
        if self.due_date < self.issue_date:
            raise ValueError("due_date cannot be before issue_date")
        return self


class InvoicePayment(BaseModel):
    payment_method: str | None = Field(None, max_length=50)
    paid_date: date | None = None


class InvoiceResponse(ORMResponse):
    id: UUID
    invoice_number: str
    vendor: str
    amount: float
    issue_date: date
    due_date: date
    paid_date: date | None
    status: str
    description: str | None
    payment_method: str | None
    notes: str | None
    line_items: list[LineItemResponse]
    badge: BadgeResponse | None = None
    created_at: datetime


class ReceiptCreate(BaseModel):
    vendor: str = Field(max_length=200)
    receipt_date: date
    category: str = Field(max_length=100)
    description: str | None = Field(None, max_length=5000)
    filename: str | None = Field(None, max_length=255)
    line_items: list[LineItemIn] = Field(min_length=1)

    @field_validator("vendor", "category")
    @classmethod
    def check_text(cls, v: str) -> str:
        return require_text(v)


class ReceiptStatusUpdate(BaseModel):
    status: Literal["approved", "rejected"]


class ReceiptResponse(ORMResponse):
    id: UUID
    receipt_number: str
    vendor: str
    receipt_date: date
    subtotal: float
    vat: float
    total: float
    category: str
    description: str | None
    filename: str | None
    status: str
    line_items: list[LineItemResponse]
    badge: BadgeResponse | None = None
    created_at: datetime

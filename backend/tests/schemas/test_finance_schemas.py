"""Finance, Inventory and Document Schemas — request validation.

Tests cover:
    - line items: description required, quantity/unit_price non-negative, quantity bounded
    - invoices need an amount or line items; due date not before issue date
    - receipts need at least one line item; status update limited to approved/rejected
    - inventory thresholds and stock operations
    - document tags accepted as list or comma-separated string
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from mentorship.core.line_items import MAX_QUANTITY
from mentorship.schemas.document import DocumentCreate, DocumentUpdate
from mentorship.schemas.finance import (
    InvoiceCreate, LineItemIn, ReceiptCreate, ReceiptStatusUpdate,
)
from mentorship.schemas.inventory import (
    InventoryCreate, InventoryUpdate, StockAdjustment,
)

ITEM = {"description": "Printer paper", "quantity": 2, "unit_price": "4.50"}


def test_line_item_rules():
    assert LineItemIn(**ITEM).unit_price == Decimal("4.50")
    with pytest.raises(ValidationError):
        LineItemIn(**{**ITEM, "description": " "})
    with pytest.raises(ValidationError):
        LineItemIn(**{**ITEM, "quantity": -1})
    with pytest.raises(ValidationError):
        LineItemIn(**{**ITEM, "unit_price": "-0.01"})


def test_invoice_requires_amount_or_items():
    base = {"vendor": "Office Depot", "issue_date": "2024-05-01", "due_date": "2024-05-31"}
    with pytest.raises(ValidationError):
        InvoiceCreate(**base)
    assert InvoiceCreate(**base, amount="120.00").amount == Decimal("120.00")
    assert len(InvoiceCreate(**base, line_items=[ITEM]).line_items) == 1


def test_invoice_due_date_not_before_issue():
    with pytest.raises(ValidationError):
        InvoiceCreate(
            vendor="Office Depot", amount=10,
            issue_date="2024-05-01", due_date="2024-04-30",
        )


def test_receipt_needs_line_items():
    with pytest.raises(ValidationError):
        ReceiptCreate(
            vendor="Shop", receipt_date="2024-05-01", category="supplies", line_items=[],
        )


def test_receipt_status_update_values():
    assert ReceiptStatusUpdate(status="approved").status == "approved"
    with pytest.raises(ValidationError):
        ReceiptStatusUpdate(status="pending")


def test_inventory_thresholds():
    item = InventoryCreate(item_name="Markers", category="supplies")
    assert item.quantity == 0
    assert item.min_stock == 5
    with pytest.raises(ValidationError):
        InventoryCreate(item_name="Markers", category="supplies", min_stock=10, max_stock=5)


def test_stock_adjustment():
    assert StockAdjustment(quantity=3, operation="subtract").operation.value == "subtract"
    with pytest.raises(ValidationError):
        StockAdjustment(quantity=3, operation="multiply")
    with pytest.raises(ValidationError):
        StockAdjustment(quantity=-3, operation="add")


def test_document_tags_split():
    doc = DocumentCreate(
        original_name="plan.pdf", mime_type="application/pdf", size=10,
        tags="weekly, planning ,",
    )
    assert doc.tags == ["weekly", "planning"]
    assert doc.category.value == "other"


def test_quantities_are_bounded():
    assert LineItemIn(**{**ITEM, "quantity": MAX_QUANTITY}).quantity == MAX_QUANTITY
    with pytest.raises(ValidationError):
        LineItemIn(**{**ITEM, "quantity": MAX_QUANTITY + 1})
    with pytest.raises(ValidationError):
        InventoryCreate(item_name="Paper", category="printing", quantity=MAX_QUANTITY + 1)
    with pytest.raises(ValidationError):
        StockAdjustment(quantity=MAX_QUANTITY + 1, operation="add")


def test_inventory_update_is_partial():
    update = InventoryUpdate(min_stock=2)
    assert update.model_dump(exclude_unset=True) == {"min_stock": 2}
    with pytest.raises(ValidationError):
        InventoryUpdate(item_name="  ")


def test_document_update_splits_tags():
    assert DocumentUpdate(tags="a, b").tags == ["a", "b"]
    assert DocumentUpdate().tags is None
    with pytest.raises(ValidationError):
        DocumentUpdate(category="secret")

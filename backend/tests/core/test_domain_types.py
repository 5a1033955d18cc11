"""Domain Types — verifies enum members and their wire values."""

from uuid import uuid4

from mentorship.core.domain_types import (
    DocumentCategory, EntityType, InvoiceStatus, MenteeId, MenteeStatus,
    ReceiptStatus, StaffId, StatusCategory, StockOperation, StockStatus,
    UserId, UserRole,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert UserId(uid) == uid
    assert StaffId(uid) == uid
    assert MenteeId(uid) == uid


def test_enums_compare_equal_to_their_values():
    assert MenteeStatus.ON_HOLD == "on-hold"
    assert StockStatus.OUT_OF_STOCK.value == "out-of-stock"
    assert DocumentCategory.WEEKLY_PLAN.value == "weekly-plan"


def test_user_roles():
    assert [r.value for r in UserRole] == ["admin", "coordinator", "mentor", "staff"]


def test_entity_statuses():
    assert {s.value for s in InvoiceStatus} == {"pending", "paid", "overdue", "cancelled"}
    assert {s.value for s in ReceiptStatus} == {"pending", "approved", "rejected"}


def test_entity_types_and_categories():
    assert {e.value for e in EntityType} == {"invoice", "receipt", "mentee", "stock"}
    assert len(StatusCategory) == 5


def test_stock_operations():
    assert {o.value for o in StockOperation} == {"set", "add", "subtract"}

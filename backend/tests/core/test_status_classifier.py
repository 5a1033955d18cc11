"""Status Classifier — tests for category resolution, badges and stock derivation.

Tests cover:
    - every rule-table row resolves to its category
    - unknown status / unknown entity type / non-string input → neutral
    - lookup is exact and case-sensitive
    - status_label replaces separators for display only
    - describe_status bundles category, label, CSS class and icon
    - derive_stock_status ordering (out → low → over → in)
"""

import pytest

from mentorship.core.domain_types import (
    EntityType, MenteeStatus, StatusCategory, StockStatus,
)
from mentorship.core.status_classifier import (
    BADGE_BASE_CLASSES,
    STATUS_RULES,
    badge_classes,
    classify,
    derive_stock_status,
    describe_status,
    status_label,
)

P = StatusCategory.POSITIVE
W = StatusCategory.WARNING
N = StatusCategory.NEGATIVE
I = StatusCategory.INFO  # noqa: E741
X = StatusCategory.NEUTRAL


# ─── classify ────────────────────────────────────────────────────

def test_invoice_rules():
    assert classify("invoice", "paid") is P
    assert classify("invoice", "pending") is W
    assert classify("invoice", "overdue") is N
    assert classify("invoice", "cancelled") is X


def test_receipt_rules():
    assert classify("receipt", "approved") is P
    assert classify("receipt", "pending") is W
    assert classify("receipt", "rejected") is N


def test_mentee_rules():
    assert classify("mentee", "active") is P
    assert classify("mentee", "completed") is I
    assert classify("mentee", "on-hold") is W
    assert classify("mentee", "dropped") is N


def test_stock_rules():
    assert classify("stock", "in-stock") is P
    assert classify("stock", "low-stock") is W
    assert classify("stock", "out-of-stock") is N
    assert classify("stock", "overstock") is I


def test_unknown_status_is_neutral():
    assert classify("invoice", "unknown-status") is X
    assert classify("receipt", "paid") is X


def test_unknown_entity_type_is_neutral():
    assert classify("bogus-type", "paid") is X
    assert classify("", "active") is X


def test_lookup_is_case_sensitive():
    assert classify("invoice", "PAID") is X
    assert classify("Invoice", "paid") is X
    assert classify("mentee", "on hold") is X


def test_enum_entity_type_accepted():
    assert classify(EntityType.INVOICE, "paid") is P
    assert classify(EntityType.STOCK, "low-stock") is W


def test_non_string_inputs_are_neutral():
    assert classify(None, "paid") is X
    assert classify("invoice", None) is X
    assert classify("invoice", 1) is X
    assert classify(["invoice"], "paid") is X


def test_classify_is_idempotent():
    first = classify("mentee", "on-hold")
    second = classify("mentee", "on-hold")
    assert first is second


def test_rule_table_is_read_only():
    with pytest.raises(TypeError):
        STATUS_RULES["invoice"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        STATUS_RULES["invoice"]["paid"] = X  # type: ignore[index]


# ─── presentation ────────────────────────────────────────────────

def test_badge_classes_colour_per_category():
    assert badge_classes(P).endswith("bg-green-100 text-green-800")
    assert badge_classes(W).endswith("bg-yellow-100 text-yellow-800")
    assert badge_classes(N).endswith("bg-red-100 text-red-800")
    assert badge_classes(I).endswith("bg-blue-100 text-blue-800")
    assert badge_classes(X).endswith("bg-gray-100 text-gray-800")
    assert badge_classes(P).startswith(BADGE_BASE_CLASSES)


def test_status_label_replaces_every_separator():
    assert status_label("on-hold") == "on hold"
    assert status_label("out-of-stock") == "out of stock"
    assert status_label("weekly_plan") == "weekly plan"
    assert status_label(None) == ""


def test_label_does_not_feed_classification():
    assert classify("mentee", status_label("on-hold")) is X


def test_describe_status_bundles_badge():
    badge = describe_status(EntityType.MENTEE, "on-hold")
    assert badge.entity_type == "mentee"
    assert badge.status == "on-hold"
    assert badge.category is W
    assert badge.label == "on hold"
    assert badge.css_class == badge_classes(W)
    assert badge.icon == "clock"


def test_describe_enum_status_uses_stored_value():
    badge = describe_status(EntityType.MENTEE, MenteeStatus.ON_HOLD)
    assert badge.status == "on-hold"
    assert badge.label == "on hold"
    assert badge.category is W
    assert status_label(StockStatus.OUT_OF_STOCK) == "out of stock"


def test_describe_unknown_status_is_neutral_badge():
    badge = describe_status("bogus", "whatever")
    assert badge.category is X
    assert badge.icon == "minus-circle"
    assert badge.to_dict()["category"] == "neutral"


# ─── derive_stock_status ─────────────────────────────────────────

def test_stock_zero_is_out_of_stock():
    assert derive_stock_status(0, 5) is StockStatus.OUT_OF_STOCK
    assert derive_stock_status(-1, 5) is StockStatus.OUT_OF_STOCK


def test_stock_at_minimum_is_low():
    assert derive_stock_status(5, 5) is StockStatus.LOW_STOCK
    assert derive_stock_status(1, 5) is StockStatus.LOW_STOCK


def test_stock_at_maximum_is_overstock():
    assert derive_stock_status(50, 5, 50) is StockStatus.OVERSTOCK
    assert derive_stock_status(49, 5, 50) is StockStatus.IN_STOCK


def test_stock_without_maximum_never_overstock():
    assert derive_stock_status(10_000, 5) is StockStatus.IN_STOCK
    assert derive_stock_status(10_000, 5, 0) is StockStatus.IN_STOCK


def test_derived_stock_status_classifies():
    status = derive_stock_status(2, 5)
    assert classify(EntityType.STOCK, status.value) is W

"""Status Classifier — maps (entity type, status value) to a display category.

Invariants:
    - classify() is total: unknown entity type or status resolves to NEUTRAL
    - Lookup is exact and case-sensitive on the raw status value
    - STATUS_RULES is built once at import and is read-only
    - status_label() is display-only and never feeds back into resolution
    - Enum inputs (entity type or status) resolve and render by their .value

Design Decisions:
    - Static two-level mapping instead of nested switch dispatch: the whole rule
      table is inspectable and testable as data
    - Visual encoding (CSS classes, icon ids) derived from the category only,
      so another UI stack can swap CATEGORY_STYLES without touching the rules
"""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from mentorship.core.domain_types import EntityType, StatusCategory, StockStatus

_P = StatusCategory.POSITIVE
_W = StatusCategory.WARNING
_N = StatusCategory.NEGATIVE
_I = StatusCategory.INFO
_X = StatusCategory.NEUTRAL

STATUS_RULES: Mapping[str, Mapping[str, StatusCategory]] = MappingProxyType({
    EntityType.INVOICE.value: MappingProxyType({
        "paid": _P, "pending": _W, "overdue": _N, "cancelled": _X,
    }),
    EntityType.RECEIPT.value: MappingProxyType({
        "approved": _P, "pending": _W, "rejected": _N,
    }),
    EntityType.MENTEE.value: MappingProxyType({
        "active": _P, "completed": _I, "on-hold": _W, "dropped": _N,
    }),
    EntityType.STOCK.value: MappingProxyType({
        "in-stock": _P, "low-stock": _W, "out-of-stock": _N, "overstock": _I,
    }),
})

BADGE_BASE_CLASSES = (
    "inline-flex items-center px-2.5 py-0.5 rounded-full text-xs font-medium"
)

CATEGORY_STYLES: Mapping[StatusCategory, str] = MappingProxyType({
    StatusCategory.POSITIVE: "bg-green-100 text-green-800",
    StatusCategory.WARNING: "bg-yellow-100 text-yellow-800",
    StatusCategory.NEGATIVE: "bg-red-100 text-red-800",
    StatusCategory.INFO: "bg-blue-100 text-blue-800",
    StatusCategory.NEUTRAL: "bg-gray-100 text-gray-800",
})

CATEGORY_ICONS: Mapping[StatusCategory, str] = MappingProxyType({
    StatusCategory.POSITIVE: "check-circle",
    StatusCategory.WARNING: "clock",
    StatusCategory.NEGATIVE: "alert-triangle",
    StatusCategory.INFO: "info",
    StatusCategory.NEUTRAL: "minus-circle",
})

_LABEL_SEPARATORS = re.compile(r"[-_]")


@dataclass(frozen=True)
class StatusBadge:
    """Everything a renderer needs to draw a status badge."""
    entity_type: str
    status: str
    category: StatusCategory
    label: str
    css_class: str
    icon: str

    def to_dict(self) -> dict:
        return {
            "entity_type": self.entity_type,
            "status": self.status,
            "category": self.category.value,
            "label": self.label,
            "css_class": self.css_class,
            "icon": self.icon,
        }


def _key(value: Any) -> str | None:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value
    return None


def _text(value: Any) -> str:
    """Enum members render as their stored value, not "Cls.MEMBER"."""
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def classify(entity_type: Any, status_value: Any) -> StatusCategory:
    """Resolve a status to its category. Never raises."""
    rules = STATUS_RULES.get(_key(entity_type))
    status = _key(status_value)
    if rules is None or status is None:
        return StatusCategory.NEUTRAL
    return rules.get(status, StatusCategory.NEUTRAL)


def badge_classes(category: StatusCategory) -> str:
    colours = CATEGORY_STYLES.get(category, CATEGORY_STYLES[StatusCategory.NEUTRAL])
    return f"{BADGE_BASE_CLASSES} {colours}"


def status_label(status_value: Any) -> str:
    """'on-hold' -> 'on hold'. Every separator is replaced."""
    if status_value is None:
        return ""
    return _LABEL_SEPARATORS.sub(" ", _text(status_value))


def describe_status(entity_type: Any, status_value: Any) -> StatusBadge:
    category = classify(entity_type, status_value)
    return StatusBadge(
        entity_type=_key(entity_type) or "",
        status="" if status_value is None else _text(status_value),
        category=category,
        label=status_label(status_value),
        css_class=badge_classes(category),
        icon=CATEGORY_ICONS[category],
    )


def derive_stock_status(
    quantity: int, min_stock: int, max_stock: int | None = None,
) -> StockStatus:
    """Stock level from quantity; checked in order out -> low -> over -> in."""
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= min_stock:
        return StockStatus.LOW_STOCK
    if max_stock and quantity >= max_stock:
        return StockStatus.OVERSTOCK
    return StockStatus.IN_STOCK

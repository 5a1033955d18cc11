"""Shared Schema Pieces — reusable field validators, badges and pagination.

Invariants:
    - Emails are stripped and lower-cased, then must pass validate_email
    - Optional phones: blank becomes None, anything else must pass validate_phone_number
    - Required text is stripped and must pass validate_required
"""

from math import ceil

from pydantic import BaseModel, ConfigDict

from mentorship.core.status_classifier import StatusBadge
from mentorship.core.validators import (
    validate_email, validate_phone_number, validate_required,
)


def normalize_email(value: str) -> str:
    value = value.strip().lower()
    if not validate_email(value):
        raise ValueError("must be a valid email address")
    return value


def normalize_optional_phone(value: str | None) -> str | None:
    if value is None or not validate_required(value):
        return None
    if not validate_phone_number(value):
        raise ValueError("must be a valid phone number")
    return value.strip()


def require_text(value: str) -> str:
    if not validate_required(value):
        raise ValueError("cannot be empty or whitespace")
    return value.strip()


class BadgeResponse(BaseModel):
    """Serialized StatusBadge."""
    entity_type: str
    status: str
    category: str
    label: str
    css_class: str
    icon: str

    @classmethod
    def from_badge(cls, badge: StatusBadge) -> "BadgeResponse":
        return cls(**badge.to_dict())


class ORMResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)


def pagination(total: int, page: int, limit: int) -> dict:
    return {
        "total": total,
        "total_pages": ceil(total / limit) if limit else 0,
        "current_page": page,
    }

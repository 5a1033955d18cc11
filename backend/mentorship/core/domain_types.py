"""Domain Types — enumerations shared by validation, classification and persistence.

Invariants:
    - All valid status values encoded as Enums; the DB stores the `.value`
    - Hyphenated values ("on-hold", "low-stock") are stored verbatim, never normalized
    - EntityType is the closed set of entity kinds the status classifier knows

Design Decisions:
    - str Enums: serialize to JSON without custom encoders, compare equal to raw strings
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
StaffId = NewType("StaffId", UUID)
MenteeId = NewType("MenteeId", UUID)


# ─── Roles ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """Account roles. Admin and coordinator may manage finance records."""
    ADMIN = "admin"
    COORDINATOR = "coordinator"
    MENTOR = "mentor"
    STAFF = "staff"


# ─── Entity Statuses ─────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class ReceiptStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class MenteeStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"
    DROPPED = "dropped"


class StockStatus(str, Enum):
    """Derived from quantity vs. min/max stock, never stored."""
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"
    OVERSTOCK = "overstock"


class DocumentCategory(str, Enum):
    WEEKLY_PLAN = "weekly-plan"
    POLICY = "policy"
    TRAINING = "training"
    TEMPLATE = "template"
    OTHER = "other"


class RiskLevel(str, Enum):
    """Risk assessment recorded on a therapy note."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class StockOperation(str, Enum):
    """Stock adjustment modes for PATCH /inventory/{id}/stock."""
    SET = "set"
    ADD = "add"
    SUBTRACT = "subtract"


# ─── Classification ──────────────────────────────────────────────

class EntityType(str, Enum):
    """Entity kinds with a status rule table."""
    INVOICE = "invoice"
    RECEIPT = "receipt"
    MENTEE = "mentee"
    STOCK = "stock"


class StatusCategory(str, Enum):
    """Semantic category selecting a visual treatment."""
    POSITIVE = "positive"
    WARNING = "warning"
    NEGATIVE = "negative"
    INFO = "info"
    NEUTRAL = "neutral"

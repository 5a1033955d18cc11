"""Constant Registry — immutable tables of roles, statuses, endpoints and file limits.

Invariants:
    - Registry constructed once per process (get_registry is lru_cached)
    - Every collection is a tuple or MappingProxyType; consumers cannot mutate it
    - Size ceilings in bytes: document 10 MiB, image 5 MiB, receipt 5 MiB

Design Decisions:
    - Frozen dataclass passed by reference instead of module-level dicts
      re-declared per call site
"""

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from mentorship.core.domain_types import (
    DocumentCategory, EntityType, InvoiceStatus, MenteeStatus,
    ReceiptStatus, StockStatus, UserRole,
)
from mentorship.core.line_items import DEFAULT_VAT_RATE

MEBIBYTE = 1024 * 1024

DOCUMENT_MAX_BYTES = 10 * MEBIBYTE
IMAGE_MAX_BYTES = 5 * MEBIBYTE
RECEIPT_MAX_BYTES = 5 * MEBIBYTE

DOCUMENT_EXTENSIONS = (
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".txt",
)
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif")
RECEIPT_EXTENSIONS = (".pdf", ".jpg", ".jpeg", ".png")

# MIME types accepted alongside the extension allow-lists
DOCUMENT_MIME_TYPES = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "text/plain",
)
IMAGE_MIME_TYPES = ("image/jpeg", "image/png", "image/gif")
RECEIPT_MIME_TYPES = ("application/pdf", "image/jpeg", "image/png")


def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ConstantRegistry:
    """Read-only reference data consumed by validators, classifier and API."""

    roles: tuple[str, ...]
    statuses: Mapping[str, tuple[str, ...]]
    document_categories: tuple[str, ...]
    api_endpoints: Mapping[str, str]
    file_extensions: Mapping[str, tuple[str, ...]]
    mime_types: Mapping[str, tuple[str, ...]]
    max_file_sizes: Mapping[str, int]
    vat_rate: float = field(default=float(DEFAULT_VAT_RATE))

    def max_size_mb(self, file_class: str) -> float:
        """Ceiling for a file class in MiB (validate_file_size takes MiB)."""
        return self.max_file_sizes[file_class] / MEBIBYTE

    def to_dict(self) -> dict:
        """JSON-ready rendering for GET /reference/constants."""
        return {
            "roles": list(self.roles),
            "statuses": {k: list(v) for k, v in self.statuses.items()},
            "document_categories": list(self.document_categories),
            "api_endpoints": dict(self.api_endpoints),
            "file_extensions": {
                k: list(v) for k, v in self.file_extensions.items()
            },
            "mime_types": {k: list(v) for k, v in self.mime_types.items()},
            "max_file_sizes": dict(self.max_file_sizes),
            "vat_rate": self.vat_rate,
        }


def build_registry(vat_rate: float = float(DEFAULT_VAT_RATE)) -> ConstantRegistry:
    """Construct a registry. Prefer get_registry() outside tests."""
    return ConstantRegistry(
        roles=tuple(r.value for r in UserRole),
        statuses=_frozen({
            EntityType.INVOICE.value: tuple(s.value for s in InvoiceStatus),
            EntityType.RECEIPT.value: tuple(s.value for s in ReceiptStatus),
            EntityType.MENTEE.value: tuple(s.value for s in MenteeStatus),
            EntityType.STOCK.value: tuple(s.value for s in StockStatus),
        }),
        document_categories=tuple(c.value for c in DocumentCategory),
        api_endpoints=_frozen({
            "auth_login": "/auth/login",
            "auth_register": "/auth/register",
            "auth_me": "/auth/me",
            "staff": "/staff",
            "mentees": "/mentees",
            "documents": "/documents",
            "receipts": "/receipts",
            "invoices": "/invoices",
            "inventory": "/inventory",
            "dashboard": "/dashboard",
        }),
        file_extensions=_frozen({
            "documents": DOCUMENT_EXTENSIONS,
            "images": IMAGE_EXTENSIONS,
            "receipts": RECEIPT_EXTENSIONS,
        }),
        mime_types=_frozen({
            "documents": DOCUMENT_MIME_TYPES,
            "images": IMAGE_MIME_TYPES,
            "receipts": RECEIPT_MIME_TYPES,
        }),
        max_file_sizes=_frozen({
            "document": DOCUMENT_MAX_BYTES,
            "image": IMAGE_MAX_BYTES,
            "receipt": RECEIPT_MAX_BYTES,
        }),
        vat_rate=vat_rate,
    )


@lru_cache
def get_registry() -> ConstantRegistry:
    return build_registry()

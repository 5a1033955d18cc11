"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Status columns store domain_types enum values verbatim

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from mentorship.models.user import User  # noqa: F401
from mentorship.models.staff import Staff  # noqa: F401
from mentorship.models.mentee import Mentee  # noqa: F401
from mentorship.models.line_item import InvoiceItem, ReceiptItem  # noqa: F401
from mentorship.models.invoice import Invoice  # noqa: F401
from mentorship.models.receipt import Receipt  # noqa: F401
from mentorship.models.inventory_item import InventoryItem  # noqa: F401
from mentorship.models.document import Document  # noqa: F401
from mentorship.models.therapy_note import TherapyNote  # noqa: F401

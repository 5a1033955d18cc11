"""Staff ORM — staff profiles, optionally linked to a User account.

Invariants:
    - email unique; mirrors the linked User's email
    - skills stored as a JSON list of strings
    - deleting a Staff row leaves its mentees unassigned (mentor_id SET NULL)
"""

import uuid
from datetime import date
from typing import Optional

from sqlalchemy import JSON, Boolean, Date, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mentorship.db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Staff(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Staff member profile shown in the staff directory."""
    __tablename__ = "staff"

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    department: Mapped[str | None] = mapped_column(String(100), nullable=True)
    hire_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    skills: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    user_account: Mapped[Optional["User"]] = relationship(
        "User", back_populates="staff_profile",
    )
    mentees: Mapped[list["Mentee"]] = relationship(
        "Mentee", back_populates="mentor", lazy="selectin",
    )

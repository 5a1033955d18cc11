"""Mentee ORM — programme participants and their assigned mentor.

Invariants:
    - email unique
    - status is a MenteeStatus value ("on-hold" stored with its hyphen)
    - goals stored as a JSON list of strings
"""

import uuid
from datetime import date
from typing import Optional

from sqlalchemy import JSON, Date, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mentorship.db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Mentee(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "mentees"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    mentor_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("staff.id", ondelete="SET NULL"),
        nullable=True,
    )
    program_start_date: Mapped[date] = mapped_column(Date, nullable=False)
    program_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    goals: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    mentor: Mapped[Optional["Staff"]] = relationship(
        "Staff", back_populates="mentees", lazy="selectin",
    )

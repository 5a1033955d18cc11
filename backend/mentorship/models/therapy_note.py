"""Therapy Note ORM — confidential session records attached to a mentee.

Invariants:
    - mentee_id references an existing mentee; notes go when the mentee goes
    - duration is in minutes and positive (checked at the API boundary)
    - risk_level is a RiskLevel value, default "low"
    - goals_addressed stored as a JSON list of strings
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    JSON, Boolean, DateTime, ForeignKey, Integer, String, Text, Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mentorship.db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class TherapyNote(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "therapy_notes"

    mentee_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("mentees.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    session_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    session_type: Mapped[str] = mapped_column(String(100), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    therapist_name: Mapped[str] = mapped_column(String(200), nullable=False)
    session_notes: Mapped[str] = mapped_column(Text, nullable=False)
    progress_observations: Mapped[str | None] = mapped_column(Text, nullable=True)
    goals_addressed: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    next_steps: Mapped[str | None] = mapped_column(Text, nullable=True)
    risk_level: Mapped[str] = mapped_column(String(10), nullable=False, default="low")
    mood_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    confidential: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    mentee: Mapped["Mentee"] = relationship("Mentee", lazy="selectin")

"""Therapy Note Schemas — session records for a mentee.

Invariants:
    - session_type, therapist_name and session_notes are required, non-blank text
    - duration is a positive number of minutes, at most one day
    - mood_rating, when given, is on a 1-5 scale
    - risk_level is one of low/medium/high
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from mentorship.core.domain_types import RiskLevel
from mentorship.schemas.common import ORMResponse, require_text
from mentorship.schemas.people import MenteeSummary


class TherapyNoteCreate(BaseModel):
    mentee_id: UUID
    session_date: datetime
    session_type: str = Field(max_length=100)
    duration: int = Field(ge=1, le=24 * 60)
    therapist_name: str = Field(max_length=200)
    session_notes: str
    progress_observations: str | None = None
    goals_addressed: list[str] = Field(default_factory=list)
    next_steps: str | None = None
    risk_level: RiskLevel = RiskLevel.LOW
    mood_rating: int | None = Field(None, ge=1, le=5)
    confidential: bool = True

    @field_validator("session_type", "therapist_name", "session_notes")
    @classmethod
    def check_text(cls, v: str) -> str:
        return require_text(v)


class TherapyNoteResponse(ORMResponse):
    id: UUID
    mentee_id: UUID
    mentee: MenteeSummary | None = None
    session_date: datetime
    session_type: str
    duration: int
    therapist_name: str
    session_notes: str
    progress_observations: str | None
    goals_addressed: list[str]
    next_steps: str | None
    risk_level: str
    mood_rating: int | None
    confidential: bool
    created_at: datetime

"""Therapy Notes — confidential session records, listed per mentee.

Invariants:
    - Listing requires mentee_id (missing → 400 via request validation)
    - Notes are returned newest session first
    - POST requires an existing mentee (404 otherwise)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorship.api.routes.query_helpers import get_or_404
from mentorship.core.domain_types import MenteeId
from mentorship.infrastructure.database import get_db
from mentorship.models.mentee import Mentee
from mentorship.models.therapy_note import TherapyNote
from mentorship.schemas.therapy_note import TherapyNoteCreate, TherapyNoteResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/therapy-notes", tags=["therapy-notes"])


async def notes_for_mentee(
    db: AsyncSession, mentee_id: MenteeId,
) -> list[TherapyNote]:
    query = (
        select(TherapyNote)
        .where(TherapyNote.mentee_id == mentee_id)
        .order_by(TherapyNote.session_date.desc())
    )
    return list((await db.scalars(query)).all())


@router.get("")
async def list_therapy_notes(
    mentee_id: UUID = Query(...),
    db: AsyncSession = Depends(get_db),
):
    notes = await notes_for_mentee(db, MenteeId(mentee_id))
    return {"notes": [TherapyNoteResponse.model_validate(n) for n in notes]}


@router.post(
    "", response_model=TherapyNoteResponse, status_code=status.HTTP_201_CREATED,
)
async def create_therapy_note(
    body: TherapyNoteCreate, db: AsyncSession = Depends(get_db),
):
    await get_or_404(db, Mentee, body.mentee_id, "Mentee")
    data = body.model_dump()
    data["risk_level"] = body.risk_level.value
    note = TherapyNote(**data)
    db.add(note)
    await db.commit()
    logger.info(
        "Therapy note created",
        extra={"entity_type": "therapy_note", "resource_id": str(note.id)},
    )
    return await get_or_404(db, TherapyNote, note.id, "Therapy note")

"""Mentee Directory — CRUD for programme participants.

Invariants:
    - Every mentee response embeds its status badge (classifier, entity "mentee")
    - Email unique across mentees → 409 on duplicates
    - mentor_id, when set, must reference an existing staff member (404 otherwise)
    - Listing supports search (name/email), status filter and pagination
    - Deleting a mentee deletes their therapy notes with it
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorship.api.routes.query_helpers import get_or_404, paginate
from mentorship.core.domain_types import EntityType, MenteeId, MenteeStatus
from mentorship.core.errors import ConflictError, FieldValidationError
from mentorship.core.status_classifier import describe_status
from mentorship.infrastructure.database import get_db
from mentorship.models.mentee import Mentee
from mentorship.models.staff import Staff
from mentorship.models.therapy_note import TherapyNote
from mentorship.schemas.common import BadgeResponse
from mentorship.schemas.people import MenteeCreate, MenteeResponse, MenteeUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/mentees", tags=["mentees"])

# Columns that cannot be cleared by sending null in an update
_REQUIRED_COLUMNS = frozenset({
    "first_name", "last_name", "email", "program_start_date", "status", "goals",
})


def to_mentee_response(mentee: Mentee) -> MenteeResponse:
    response = MenteeResponse.model_validate(mentee)
    response.badge = BadgeResponse.from_badge(
        describe_status(EntityType.MENTEE, mentee.status),
    )
    return response


async def _ensure_email_free(
    db: AsyncSession, email: str, exclude_id: MenteeId | None = None,
) -> None:
    query = select(Mentee.id).where(Mentee.email == email)
    if exclude_id is not None:
        query = query.where(Mentee.id != exclude_id)
    if await db.scalar(query):
        raise ConflictError(f"A mentee with email '{email}' already exists")


@router.get("")
async def list_mentees(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str | None = Query(None, max_length=200),
    status_filter: MenteeStatus | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    """List mentees, newest first."""
    query = select(Mentee).order_by(Mentee.created_at.desc())
    if search:
        pattern = f"%{search.strip()}%"
        query = query.where(or_(
            Mentee.first_name.ilike(pattern),
            Mentee.last_name.ilike(pattern),
            Mentee.email.ilike(pattern),
        ))
    if status_filter:
        query = query.where(Mentee.status == status_filter.value)

    mentees, page_info = await paginate(db, query, page, limit)
    return {
        "mentees": [to_mentee_response(m) for m in mentees],
        **page_info,
    }


@router.get("/{mentee_id}", response_model=MenteeResponse)
async def get_mentee(mentee_id: UUID, db: AsyncSession = Depends(get_db)):
    return to_mentee_response(await get_or_404(db, Mentee, mentee_id, "Mentee"))


@router.post(
    "", response_model=MenteeResponse, status_code=status.HTTP_201_CREATED,
)
async def create_mentee(body: MenteeCreate, db: AsyncSession = Depends(get_db)):
    await _ensure_email_free(db, body.email)
    if body.mentor_id:
        await get_or_404(db, Staff, body.mentor_id, "Staff")

    mentee = Mentee(**body.model_dump(mode="python"))
    mentee.status = body.status.value
    db.add(mentee)
    await db.commit()
    logger.info(
        "Mentee created",
        extra={"entity_type": "mentee", "resource_id": str(mentee.id)},
    )
    return to_mentee_response(await get_or_404(db, Mentee, mentee.id, "Mentee"))


@router.put("/{mentee_id}", response_model=MenteeResponse)
async def update_mentee(
    mentee_id: UUID, body: MenteeUpdate, db: AsyncSession = Depends(get_db),
):
    mentee = await get_or_404(db, Mentee, mentee_id, "Mentee")
    changes = body.model_dump(exclude_unset=True)
    changes = {
        k: v for k, v in changes.items()
        if v is not None or k not in _REQUIRED_COLUMNS
    }
    if "email" in changes:
        await _ensure_email_free(
            db, changes["email"], exclude_id=MenteeId(mentee_id),
        )
    if changes.get("mentor_id"):
        await get_or_404(db, Staff, changes["mentor_id"], "Staff")
    if "status" in changes:
        changes["status"] = MenteeStatus(changes["status"]).value

    for key, value in changes.items():
        setattr(mentee, key, value)
    if mentee.program_end_date and mentee.program_end_date < mentee.program_start_date:
        raise FieldValidationError(
            "program_end_date cannot be before program_start_date",
            "program_end_date",
        )
    await db.commit()
    return to_mentee_response(await get_or_404(db, Mentee, mentee_id, "Mentee"))


@router.delete("/{mentee_id}")
async def delete_mentee(mentee_id: UUID, db: AsyncSession = Depends(get_db)):
    mentee = await get_or_404(db, Mentee, mentee_id, "Mentee")
    await db.execute(delete(TherapyNote).where(TherapyNote.mentee_id == mentee_id))
    await db.delete(mentee)
    await db.commit()
    logger.info(
        "Mentee deleted",
        extra={"entity_type": "mentee", "resource_id": str(mentee_id)},
    )
    return {"message": "Mentee deleted successfully"}

"""Staff Directory — staff profiles with their linked login accounts.

Invariants:
    - POST creates the User account and the Staff profile in one transaction
    - The generated temporary password is returned once and stored only as a hash
    - Email unique across users and staff → 409 on duplicates
    - Listing shows active staff only, searchable by name/email/department
    - PUT mirrors name, email, role and is_active onto the linked User account
    - DELETE removes the Staff profile and its linked User in one transaction;
      the staff member's mentees become unassigned
    - set-password requires 8+ characters and stores a fresh PBKDF2 hash
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorship.api.routes.query_helpers import get_or_404, paginate
from mentorship.core.domain_types import StaffId, UserId
from mentorship.core.errors import ConflictError, ResourceNotFoundError
from mentorship.infrastructure.database import get_db
from mentorship.infrastructure.passwords import (
    generate_temporary_password, hash_password,
)
from mentorship.models.staff import Staff
from mentorship.models.user import User
from mentorship.schemas.people import (
    PasswordSet, StaffCreate, StaffResponse, StaffUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/staff", tags=["staff"])

# Fields shared by the Staff profile and its login account
_ACCOUNT_FIELDS = ("first_name", "last_name", "email", "role", "is_active")


async def _ensure_email_free(
    db: AsyncSession,
    email: str,
    staff_id: StaffId | None = None,
    user_id: UserId | None = None,
) -> None:
    user_query = select(User.id).where(User.email == email)
    if user_id is not None:
        user_query = user_query.where(User.id != user_id)
    staff_query = select(Staff.id).where(Staff.email == email)
    if staff_id is not None:
        staff_query = staff_query.where(Staff.id != staff_id)
    if await db.scalar(user_query) or await db.scalar(staff_query):
        raise ConflictError("A user with this email already exists")


async def _linked_user(db: AsyncSession, staff: Staff) -> User:
    user = await db.get(User, staff.user_id) if staff.user_id else None
    if user is None:
        raise ResourceNotFoundError("User account for staff", str(staff.id))
    return user


@router.get("")
async def list_staff(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str | None = Query(None, max_length=200),
    db: AsyncSession = Depends(get_db),
):
    query = (
        select(Staff)
        .where(Staff.is_active.is_(True))
        .order_by(Staff.last_name, Staff.first_name)
    )
    if search:
        pattern = f"%{search.strip()}%"
        query = query.where(or_(
            Staff.first_name.ilike(pattern),
            Staff.last_name.ilike(pattern),
            Staff.email.ilike(pattern),
            Staff.department.ilike(pattern),
        ))
    staff, page_info = await paginate(db, query, page, limit)
    return {
        "staff": [StaffResponse.model_validate(s) for s in staff],
        **page_info,
    }


@router.get("/{staff_id}", response_model=StaffResponse)
async def get_staff(staff_id: UUID, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, Staff, staff_id, "Staff")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_staff(body: StaffCreate, db: AsyncSession = Depends(get_db)):
    """Create staff member plus login account with a temporary password."""
    await _ensure_email_free(db, body.email)

    temp_password = generate_temporary_password()
    user = User(
        email=body.email,
        password_hash=hash_password(temp_password),
        first_name=body.first_name,
        last_name=body.last_name,
        role=body.role,
    )
    db.add(user)
    await db.flush()

    staff = Staff(user_id=user.id, **body.model_dump())
    db.add(staff)
    await db.commit()
    logger.info(
        "Staff member created",
        extra={"entity_type": "staff", "resource_id": str(staff.id)},
    )

    staff = await get_or_404(db, Staff, staff.id, "Staff")
    return {
        "message": "Staff member and user account created successfully",
        "staff": StaffResponse.model_validate(staff),
        "temporary_password": temp_password,
    }


@router.put("/{staff_id}")
async def update_staff(
    staff_id: UUID, body: StaffUpdate, db: AsyncSession = Depends(get_db),
):
    """Update the profile; account fields are copied onto the linked User."""
    staff = await get_or_404(db, Staff, staff_id, "Staff")
    changes = {
        k: v for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k in ("phone", "department", "hire_date", "bio")
    }
    user = await _linked_user(db, staff) if staff.user_id else None
    if "email" in changes:
        await _ensure_email_free(
            db, changes["email"],
            staff_id=StaffId(staff.id),
            user_id=UserId(user.id) if user else None,
        )

    for key, value in changes.items():
        setattr(staff, key, value)
    if user is not None:
        for key in _ACCOUNT_FIELDS:
            if key in changes:
                setattr(user, key, changes[key])
    await db.commit()
    logger.info(
        "Staff member updated",
        extra={"entity_type": "staff", "resource_id": str(staff_id)},
    )
    return {
        "message": "Staff member updated successfully",
        "staff": StaffResponse.model_validate(
            await get_or_404(db, Staff, staff_id, "Staff"),
        ),
    }


@router.delete("/{staff_id}")
async def delete_staff(staff_id: UUID, db: AsyncSession = Depends(get_db)):
    staff = await get_or_404(db, Staff, staff_id, "Staff")
    user_id = staff.user_id
    await db.delete(staff)
    await db.flush()
    if user_id is not None:
        await db.execute(delete(User).where(User.id == user_id))
    await db.commit()
    logger.info(
        "Staff member deleted",
        extra={"entity_type": "staff", "resource_id": str(staff_id)},
    )
    return {
        "message": "Staff member and associated user account deleted successfully",
    }


@router.put("/{staff_id}/set-password")
async def set_staff_password(
    staff_id: UUID, body: PasswordSet, db: AsyncSession = Depends(get_db),
):
    staff = await get_or_404(db, Staff, staff_id, "Staff")
    user = await _linked_user(db, staff)
    user.password_hash = hash_password(body.password)
    await db.commit()
    logger.info(
        "Staff password reset",
        extra={"entity_type": "staff", "resource_id": str(staff_id)},
    )
    return {
        "message": f"Password for {user.first_name} {user.last_name} has been updated",
    }

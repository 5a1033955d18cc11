"""Query Helpers — lookups, pagination and generated record numbers shared by routers.

Invariants:
    - get_or_404 raises ResourceNotFoundError, never returns None
    - get_or_404 reloads eager relationships (populate_existing), so freshly
      committed objects serialize without a lazy load
    - paginate counts the filtered query before applying offset/limit
    - generated numbers never collide with an existing row in the same column
"""

import time
from typing import Any, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorship.core.errors import ResourceNotFoundError
from mentorship.schemas.common import pagination

ModelT = TypeVar("ModelT")


async def get_or_404(
    db: AsyncSession, model: type[ModelT], record_id: UUID, resource: str,
) -> ModelT:
    result = await db.execute(
        select(model)
        .where(model.id == record_id)
        .execution_options(populate_existing=True),
    )
    record = result.scalar_one_or_none()
    if record is None:
        raise ResourceNotFoundError(resource, str(record_id))
    return record


async def paginate(
    db: AsyncSession, query: Select, page: int, limit: int,
) -> tuple[Sequence[Any], dict]:
    """Run query for one page. Returns (rows, pagination envelope fields)."""
    total = await db.scalar(
        select(func.count()).select_from(query.order_by(None).subquery()),
    )
    result = await db.execute(query.offset((page - 1) * limit).limit(limit))
    return result.scalars().all(), pagination(total or 0, page, limit)


async def generated_number(db: AsyncSession, column: Any, prefix: str) -> str:
    """Record number like "INV-1718000000000" (epoch ms), bumped past taken ones."""
    stamp = time.time_ns() // 1_000_000
    while await db.scalar(select(column).where(column == f"{prefix}-{stamp}")):
        stamp += 1
    return f"{prefix}-{stamp}"

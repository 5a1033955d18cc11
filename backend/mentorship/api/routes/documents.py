"""Documents — metadata registration, listing, editing and deletion.

Invariants:
    - original_name must carry a document extension (registry "documents")
    - mime_type must be a registered document MIME type
    - size must not exceed the document ceiling (10 MiB)
    - File bytes are stored elsewhere; this API keeps metadata only
    - PUT edits descriptive fields only, so a registered file stays validated
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorship.api.routes.query_helpers import get_or_404, paginate
from mentorship.core.constants import get_registry
from mentorship.core.domain_types import DocumentCategory
from mentorship.core.errors import FieldValidationError
from mentorship.core.validators import (
    FileDescriptor, has_allowed_extension, validate_file_size, validate_file_type,
)
from mentorship.infrastructure.database import get_db
from mentorship.models.document import Document
from mentorship.schemas.document import (
    DocumentCreate, DocumentResponse, DocumentUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/documents", tags=["documents"])


def check_document_file(body: DocumentCreate) -> None:
    """Raise FieldValidationError for a file the document library refuses."""
    registry = get_registry()
    if not has_allowed_extension(
        body.original_name, registry.file_extensions["documents"],
    ):
        raise FieldValidationError(
            "Invalid file type. Allowed: "
            + ", ".join(registry.file_extensions["documents"]),
            "original_name",
        )
    descriptor = FileDescriptor(size=body.size, type=body.mime_type)
    if not validate_file_type(descriptor, registry.mime_types["documents"]):
        raise FieldValidationError(
            f"Unsupported MIME type '{body.mime_type}'", "mime_type",
        )
    max_mb = registry.max_size_mb("document")
    if not validate_file_size(descriptor, max_mb):
        raise FieldValidationError(
            f"File too large. Maximum size is {max_mb:g}MB", "size",
        )


@router.get("")
async def list_documents(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str | None = Query(None, max_length=200),
    category: DocumentCategory | None = None,
    db: AsyncSession = Depends(get_db),
):
    query = select(Document).order_by(Document.created_at.desc())
    if search:
        pattern = f"%{search.strip()}%"
        query = query.where(or_(
            Document.title.ilike(pattern),
            Document.original_name.ilike(pattern),
            Document.description.ilike(pattern),
        ))
    if category:
        query = query.where(Document.category == category.value)
    documents, page_info = await paginate(db, query, page, limit)
    return {
        "documents": [DocumentResponse.model_validate(d) for d in documents],
        **page_info,
    }


@router.post(
    "", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED,
)
async def create_document(body: DocumentCreate, db: AsyncSession = Depends(get_db)):
    check_document_file(body)
    document = Document(
        title=body.title or body.original_name,
        original_name=body.original_name,
        mime_type=body.mime_type,
        size=body.size,
        category=body.category.value,
        description=body.description,
        tags=body.tags,
        is_public=body.is_public,
    )
    db.add(document)
    await db.commit()
    logger.info(
        f"Document registered: {document.original_name}",
        extra={"entity_type": "document", "resource_id": str(document.id)},
    )
    return document


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: UUID, body: DocumentUpdate, db: AsyncSession = Depends(get_db),
):
    document = await get_or_404(db, Document, document_id, "Document")
    changes = {
        k: v for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k == "description"
    }
    if "category" in changes:
        changes["category"] = changes["category"].value
    for key, value in changes.items():
        setattr(document, key, value)
    await db.commit()
    logger.info(
        "Document updated",
        extra={"entity_type": "document", "resource_id": str(document_id)},
    )
    return await get_or_404(db, Document, document_id, "Document")


@router.delete("/{document_id}")
async def delete_document(document_id: UUID, db: AsyncSession = Depends(get_db)):
    document = await get_or_404(db, Document, document_id, "Document")
    await db.delete(document)
    await db.commit()
    return {"message": "Document deleted successfully"}

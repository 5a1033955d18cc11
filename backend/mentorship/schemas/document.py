"""Document Schemas — metadata registration for uploaded documents.

Invariants:
    - original_name carries an allowed document extension
    - size and mime_type pass validate_file_size / validate_file_type
      (checked in the route against the constant registry, so the error
      names the offending limit)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, computed_field, field_validator

from mentorship.core.domain_types import DocumentCategory
from mentorship.core.formatters import format_file_size
from mentorship.schemas.common import ORMResponse, require_text


def split_tags(value: list[str] | str) -> list[str]:
    """Accept "a, b" as well as ["a", "b"]."""
    items = value.split(",") if isinstance(value, str) else value
    return [tag.strip() for tag in items if tag.strip()]


class DocumentCreate(BaseModel):
    title: str | None = Field(None, max_length=255)
    original_name: str = Field(max_length=255)
    mime_type: str = Field(max_length=150)
    size: int = Field(ge=0)
    category: DocumentCategory = DocumentCategory.OTHER
    description: str | None = Field(None, max_length=5000)
    tags: list[str] | str = Field(default_factory=list)
    is_public: bool = False

    @field_validator("original_name")
    @classmethod
    def check_original_name(cls, v: str) -> str:
        return require_text(v)

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str] | str) -> list[str]:
        return split_tags(v)


class DocumentUpdate(BaseModel):
    """Descriptive fields only; file name, type and size are fixed at registration."""
    title: str | None = Field(None, max_length=255)
    category: DocumentCategory | None = None
    description: str | None = Field(None, max_length=5000)
    tags: list[str] | str | None = None
    is_public: bool | None = None

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str | None) -> str | None:
        return None if v is None else require_text(v)

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str] | str | None) -> list[str] | None:
        if v is None:
            return None
        return split_tags(v)


class DocumentResponse(ORMResponse):
    id: UUID
    title: str
    original_name: str
    mime_type: str
    size: int
    category: str
    description: str | None
    tags: list[str]
    is_public: bool
    created_at: datetime

    @computed_field
    @property
    def size_display(self) -> str:
        return format_file_size(self.size)

"""People Schemas — mentee and staff request/response models.

Invariants:
    - MenteeCreate: names required, email valid, programme start date required
    - MenteeUpdate: every field optional; provided fields re-validated
    - StaffCreate.role limited to admin/coordinator/mentor (staff role is for accounts only)
    - program_end_date, when given, is not before program_start_date
    - Phones are at most 30 characters, separators included (column width)
    - PasswordSet requires at least 8 characters (stricter than sign-up)
"""

from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from mentorship.core.domain_types import MenteeStatus
from mentorship.schemas.common import (
    BadgeResponse, ORMResponse,
    normalize_email, normalize_optional_phone, require_text,
)


class MenteeCreate(BaseModel):
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=255)
    phone: str | None = Field(None, max_length=30)
    mentor_id: UUID | None = None
    program_start_date: date
    program_end_date: date | None = None
    status: MenteeStatus = MenteeStatus.ACTIVE
    goals: list[str] = Field(default_factory=list)
    notes: str | None = Field(None, max_length=5000)

    @field_validator("first_name", "last_name")
    @classmethod
    def check_names(cls, v: str) -> str:
        return require_text(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str | None) -> str | None:
        return normalize_optional_phone(v)

    @model_validator(mode="after")
    def check_program_dates(self):
        if self.program_end_date and self.program_end_date < self.program_start_date:
            raise ValueError("program_end_date cannot be before program_start_date")
        return self


class MenteeUpdate(BaseModel):
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=30)
    mentor_id: UUID | None = None
    program_start_date: date | None = None
    program_end_date: date | None = None
    status: MenteeStatus | None = None
    goals: list[str] | None = None
    notes: str | None = Field(None, max_length=5000)

    @field_validator("first_name", "last_name")
    @classmethod
    def check_names(cls, v: str | None) -> str | None:
        return None if v is None else require_text(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str | None:
        return None if v is None else normalize_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str | None) -> str | None:
        return normalize_optional_phone(v)


class MentorSummary(ORMResponse):
    id: UUID
    first_name: str
    last_name: str
    email: str


class MenteeResponse(ORMResponse):
    id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str | None
    mentor_id: UUID | None
    mentor: MentorSummary | None = None
    program_start_date: date
    program_end_date: date | None
    status: str
    goals: list[str]
    notes: str | None
    badge: BadgeResponse | None = None
    created_at: datetime


class StaffCreate(BaseModel):
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=255)
    role: Literal["admin", "coordinator", "mentor"]
    phone: str | None = Field(None, max_length=30)
    department: str | None = Field(None, max_length=100)
    hire_date: date | None = None
    bio: str | None = Field(None, max_length=5000)
    skills: list[str] = Field(default_factory=list)

    @field_validator("first_name", "last_name")
    @classmethod
    def check_names(cls, v: str) -> str:
        return require_text(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str | None) -> str | None:
        return normalize_optional_phone(v)


class MenteeSummary(ORMResponse):
    id: UUID
    first_name: str
    last_name: str


class StaffResponse(ORMResponse):
    id: UUID
    user_id: UUID | None
    first_name: str
    last_name: str
    email: str
    phone: str | None
    role: str
    department: str | None
    hire_date: date | None
    is_active: bool
    bio: str | None
    skills: list[str]
    mentees: list[MenteeSummary] = Field(default_factory=list)


class StaffUpdate(BaseModel):
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    role: Literal["admin", "coordinator", "mentor"] | None = None
    phone: str | None = Field(None, max_length=30)
    department: str | None = Field(None, max_length=100)
    hire_date: date | None = None
    is_active: bool | None = None
    bio: str | None = Field(None, max_length=5000)
    skills: list[str] | None = None

    @field_validator("first_name", "last_name")
    @classmethod
    def check_names(cls, v: str | None) -> str | None:
        return None if v is None else require_text(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str | None:
        return None if v is None else normalize_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str | None) -> str | None:
        return normalize_optional_phone(v)


class PasswordSet(BaseModel):
    password: str = Field(min_length=8, max_length=128)

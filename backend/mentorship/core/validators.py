"""Input Validators — pure boolean predicates over primitive user input.

Invariants:
    - Every validator is total: returns bool, never raises
    - Wrong-typed input yields False (non-str email/phone/password, non-int size)
    - Regexes are deliberately permissive and must not be tightened:
      email is purely syntactic, phone rejects any leading zero
    - Phone digits are ASCII 0-9 only; other Unicode decimal digits are rejected
    - Lengths count code points (len on str)

Design Decisions:
    - FileDescriptor accepts both attribute objects and {"size", "type"} mappings,
      so UploadFile-like objects and JSON metadata go through the same check
    - validate_form reports only the first failing rule per field, so a UI can
      flag each field once
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Collection, Mapping, Sequence

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[1-9][0-9]{0,15}")
PHONE_SEPARATORS = re.compile(r"[\s\-()]")

MIN_PASSWORD_LENGTH = 6
DEFAULT_MAX_SIZE_MB = 10
BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class FileDescriptor:
    """Minimal file description: byte size and MIME type."""
    size: int
    type: str


def _file_attr(file: Any, name: str) -> Any:
    if isinstance(file, Mapping):
        return file.get(name)
    return getattr(file, name, None)


# ─── Primitive validators ────────────────────────────────────────

def validate_email(email: Any) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_password(password: Any) -> bool:
    if not isinstance(password, str):
        return False
    return len(password) >= MIN_PASSWORD_LENGTH


def validate_required(value: Any) -> bool:
    """Non-None and non-blank once stringified. 0 and False are present values."""
    if value is None:
        return False
    return len(str(value).strip()) > 0


def validate_phone_number(phone: Any) -> bool:
    """E.164-like: optional '+', first digit 1-9, at most 16 digits total."""
    if not isinstance(phone, str):
        return False
    stripped = PHONE_SEPARATORS.sub("", phone)
    return PHONE_PATTERN.fullmatch(stripped) is not None


def validate_file_size(file: Any, max_size_mb: float = DEFAULT_MAX_SIZE_MB) -> bool:
    size = _file_attr(file, "size")
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        return False
    return size <= max_size_mb * BYTES_PER_MB


def validate_file_type(file: Any, allowed_types: Collection[str]) -> bool:
    mime_type = _file_attr(file, "type")
    if not isinstance(mime_type, str):
        return False
    return mime_type in allowed_types


def has_allowed_extension(filename: Any, allowed_extensions: Collection[str]) -> bool:
    """Case-insensitive extension check against an allow-list like ('.pdf', ...)."""
    if not isinstance(filename, str) or "." not in filename:
        return False
    extension = filename[filename.rfind("."):].lower()
    return extension in allowed_extensions


# ─── Form validation ─────────────────────────────────────────────

@dataclass(frozen=True)
class FieldRule:
    """One check on a form field; message shown when the check fails."""
    check: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FormValidation:
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {"is_valid": self.is_valid, "errors": dict(self.errors)}


def validate_form(
    values: Mapping[str, Any],
    rules: Mapping[str, Sequence[FieldRule]],
) -> FormValidation:
    """Apply rules field by field; a missing field is validated as None."""
    errors: dict[str, str] = {}
    for field_name, field_rules in rules.items():
        value = values.get(field_name)
        for rule in field_rules:
            if not rule.check(value):
                errors[field_name] = rule.message
                break
    return FormValidation(errors=errors)


def _optional(check: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Blank values pass; anything else must satisfy check."""
    return lambda value: not validate_required(value) or check(value)


LOGIN_FORM_RULES: Mapping[str, Sequence[FieldRule]] = {
    "email": (
        FieldRule(validate_required, "Email is required"),
        FieldRule(validate_email, "Please enter a valid email address"),
    ),
    "password": (
        FieldRule(validate_required, "Password is required"),
        FieldRule(
            validate_password,
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        ),
    ),
}

REGISTRATION_FORM_RULES: Mapping[str, Sequence[FieldRule]] = {
    "first_name": (FieldRule(validate_required, "First name is required"),),
    "last_name": (FieldRule(validate_required, "Last name is required"),),
    **LOGIN_FORM_RULES,
    "phone": (
        FieldRule(
            _optional(validate_phone_number),
            "Please enter a valid phone number",
        ),
    ),
}

PASSWORD_CHANGE_RULES: Mapping[str, Sequence[FieldRule]] = {
    "current_password": (
        FieldRule(validate_required, "Current password is required"),
    ),
    "new_password": (
        FieldRule(validate_required, "New password is required"),
        FieldRule(
            validate_password,
            f"New password must be at least {MIN_PASSWORD_LENGTH} characters",
        ),
    ),
}

FORM_RULES: Mapping[str, Mapping[str, Sequence[FieldRule]]] = {
    "login": LOGIN_FORM_RULES,
    "registration": REGISTRATION_FORM_RULES,
    "password-change": PASSWORD_CHANGE_RULES,
}

"""Reference Schemas — form-validation results."""

from pydantic import BaseModel


class FormValidationResponse(BaseModel):
    form: str
    is_valid: bool
    errors: dict[str, str]

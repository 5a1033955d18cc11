"""Reference Data — constant registry, status badges and form validation over HTTP.

Invariants:
    - GET /reference/status/... is total: unknown entity type or status → neutral badge, 200
    - POST /reference/validate/{form} runs the same rules the admin UI runs
    - Unknown form names → 404 (ResourceNotFoundError)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body

from mentorship.core.constants import get_registry
from mentorship.core.errors import ResourceNotFoundError
from mentorship.core.status_classifier import describe_status
from mentorship.core.validators import FORM_RULES, validate_form
from mentorship.schemas.common import BadgeResponse
from mentorship.schemas.reference import FormValidationResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/reference", tags=["reference"])


@router.get("/constants")
async def get_constants():
    return get_registry().to_dict()


@router.get("/status/{entity_type}/{status_value}", response_model=BadgeResponse)
async def get_status_badge(entity_type: str, status_value: str):
    return BadgeResponse.from_badge(describe_status(entity_type, status_value))


@router.post("/validate/{form}", response_model=FormValidationResponse)
async def validate_form_values(form: str, values: dict[str, Any] = Body(...)):
    rules = FORM_RULES.get(form)
    if rules is None:
        raise ResourceNotFoundError("Form", form)
    result = validate_form(values, rules)
    return FormValidationResponse(
        form=form, is_valid=result.is_valid, errors=result.errors,
    )

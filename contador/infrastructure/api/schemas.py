"""Request/response models for the roster API."""

from __future__ import annotations

import json

from pydantic import BaseModel, StrictStr
from pydantic import ValidationError as PydanticValidationError

from contador.domain.exceptions import ValidationError


class AddPersonRequest(BaseModel):
    name: StrictStr


class PersonOut(BaseModel):
    id: str
    name: str
    count: int


class CountOut(BaseModel):
    count: int


def parse_add_person(body: bytes) -> AddPersonRequest:
    """Validate a raw ``POST /api/person`` body.

    FastAPI's implicit body validation answers 422; this API answers 400 with
    ``{"error": ...}`` for every malformed body, so parsing is done by hand.
    """
    try:
        payload = json.loads(body or b"null")
    except ValueError as e:
        raise ValidationError("Request body must be JSON") from e

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object with a 'name'")

    try:
        return AddPersonRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError("Field 'name' is required and must be a string") from e

"""
schemas/users.py — Request and response models for /users

CreateUserRequest and UpdateUserRequest carry the same constraints:
- name: required, 1–255 characters
- dob: required, strict YYYY-MM-DD, must be a real calendar date

validate_user_request() is the single entry point routers use to turn a
decoded JSON payload into a request model. It converts pydantic errors
into the domain ValidationError so the message can be sent back as-is.

UserView is the response shape. ``age`` is only filled in by get and list;
routers drop it from the JSON when it is None.

Called by: routers/users.py, services/user_service.py
Depends on: pydantic, exceptions.py
"""

from __future__ import annotations

import re
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

DOB_FORMAT = "%Y-%m-%d"
_DOB_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_dob(value: str) -> date:
    """Parse a strict YYYY-MM-DD string. Raises ValueError otherwise."""
    # strptime alone would accept "1990-5-1"
    if not isinstance(value, str) or not _DOB_PATTERN.fullmatch(value):
        raise ValueError(f"dob must be formatted YYYY-MM-DD, got {value!r}")
    return datetime.strptime(value, DOB_FORMAT).date()


class _UserRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Alice"])
    dob: str = Field(..., examples=["1990-05-10"])

    @field_validator("dob")
    @classmethod
    def _dob_is_calendar_date(cls, v: str) -> str:
        parse_dob(v)
        return v


class CreateUserRequest(_UserRequest):
    pass


class UpdateUserRequest(_UserRequest):
    pass


class UserView(BaseModel):
    id: int
    name: str
    dob: date
    age: int | None = None


def _format_errors(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"]) or "body"
        msg = err["msg"]
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        parts.append(f"{field}: {msg}")
    return "; ".join(parts)


def validate_user_request(model: type[_UserRequest], payload: object) -> _UserRequest:
    """Validate a decoded JSON payload against ``model``.

    Raises ValidationError with a readable message on failure.
    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(_format_errors(e)) from e

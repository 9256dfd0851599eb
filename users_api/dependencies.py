"""
dependencies.py — Shared FastAPI Dependencies

Business Rules:
- get_user_service builds the service around the request-scoped Session
- parse_user_id accepts an optionally signed base-10 int64, else 400 "invalid id"
- read_json_body requires a JSON object body, else 400 "invalid JSON"

Called by: routers/users.py
Depends on: database, repositories, services, exceptions
"""

import json
import re

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .database import get_db
from .exceptions import ValidationError
from .models import MAX_USER_ID, MIN_USER_ID
from .repositories import UserRepository
from .services.user_service import UserService

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


def parse_user_id(user_id: str) -> int:
    """Dependency: the ``{user_id}`` path segment as a bounded integer."""
    if not _ID_PATTERN.fullmatch(user_id):
        raise ValidationError("invalid id")
    value = int(user_id)
    if not MIN_USER_ID <= value <= MAX_USER_ID:
        raise ValidationError("invalid id")
    return value


async def read_json_body(request: Request) -> dict:
    """Dependency: the decoded request body, which must be a JSON object."""
    raw = await request.body()
    try:
        payload = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise ValidationError("invalid JSON") from e
    if not isinstance(payload, dict):
        raise ValidationError("invalid JSON")
    return payload

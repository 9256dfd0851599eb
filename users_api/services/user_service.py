"""
user_service.py — Business logic for users

Parses dates of birth, derives age, and maps repository records to the
API-facing UserView.

Business Rules:
- dob is parsed strictly as YYYY-MM-DD; anything else is a ValidationError
- age is whole elapsed years, clamped at 0 for a dob in the future
- get and list return age; create and update do not
- list computes every age against a single "today" captured up front
- Repository errors (NotFoundError, PersistenceError) propagate unchanged

Called by: routers/users.py (via dependencies.get_user_service)
Depends on: repositories/user_repository.py, schemas/users.py
"""

from datetime import date, datetime, timezone
from typing import Callable

from loguru import logger

from ..exceptions import ValidationError
from ..repositories import UserRecord, UserRepository
from ..schemas.users import CreateUserRequest, UpdateUserRequest, UserView, parse_dob


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def calculate_age(dob: date, today: date) -> int:
    """Whole years from ``dob`` to ``today``, never negative.

    A Feb 29 birthday counts as reached on Mar 1 in non-leap years.
    """
    years = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        years -= 1
    return max(years, 0)


def _parse_request_dob(raw: str) -> date:
    try:
        return parse_dob(raw)
    except ValueError as e:
        raise ValidationError(str(e)) from e


def _to_view(record: UserRecord, today: date | None = None) -> UserView:
    age = calculate_age(record.dob, today) if today is not None else None
    return UserView(id=record.id, name=record.name, dob=record.dob, age=age)


class UserService:
    def __init__(self, repo: UserRepository, today: Callable[[], date] = utc_today):
        self.repo = repo
        self.today = today

    def create(self, req: CreateUserRequest) -> UserView:
        dob = _parse_request_dob(req.dob)
        record = self.repo.create(req.name, dob)
        logger.info("Created user #{}", record.id)
        return _to_view(record)

    def get(self, user_id: int) -> UserView:
        record = self.repo.get_by_id(user_id)
        return _to_view(record, self.today())

    def list(self) -> list[UserView]:
        records = self.repo.list()
        today = self.today()
        return [_to_view(r, today) for r in records]

    def update(self, user_id: int, req: UpdateUserRequest) -> UserView:
        dob = _parse_request_dob(req.dob)
        record = self.repo.update(user_id, req.name, dob)
        logger.info("Updated user #{}", record.id)
        return _to_view(record)

    def delete(self, user_id: int) -> None:
        self.repo.delete(user_id)
        logger.info("Deleted user #{}", user_id)

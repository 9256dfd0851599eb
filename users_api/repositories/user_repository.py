"""
user_repository.py — Data access for the users table

Issues parameterized statements through the request-scoped SQLAlchemy
Session and hands back UserRecord values, never ORM instances, so nothing
above this layer can lazy-load or mutate rows by accident.

Business Rules:
- Ids are signed 64-bit; callers bounds-check before getting here
- dob is stored as a SQL DATE, never a timestamp
- get_by_id / update raise NotFoundError when no row matches
- delete of a missing id is a no-op (idempotent)
- Every SQLAlchemyError is rolled back and re-raised as PersistenceError
- Each write commits on its own; no cross-statement transactions

Called by: services/user_service.py
Depends on: models/user.py, exceptions.py
"""

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError, PersistenceError
from ..models import User


@dataclass(frozen=True)
class UserRecord:
    """A users row as seen by the service layer."""

    id: int
    name: str
    dob: date


def _to_record(row: User) -> UserRecord:
    return UserRecord(id=row.id, name=row.name, dob=row.dob)


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _storage_errors(self, operation: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning("users.{} failed: {}", operation, e)
            raise PersistenceError(f"{operation} failed") from e

    def create(self, name: str, dob: date) -> UserRecord:
        with self._storage_errors("create"):
            row = User(name=name, dob=dob)
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            return _to_record(row)

    def get_by_id(self, user_id: int) -> UserRecord:
        with self._storage_errors("get"):
            row = self.db.get(User, user_id)
        if row is None:
            raise NotFoundError()
        return _to_record(row)

    def list(self) -> list[UserRecord]:
        with self._storage_errors("list"):
            rows = self.db.query(User).order_by(User.id).all()
        return [_to_record(r) for r in rows]

    def update(self, user_id: int, name: str, dob: date) -> UserRecord:
        with self._storage_errors("update"):
            row = self.db.get(User, user_id)
            if row is None:
                raise NotFoundError()
            row.name = name
            row.dob = dob
            self.db.commit()
            self.db.refresh(row)
            return _to_record(row)

    def delete(self, user_id: int) -> None:
        # Delete through the ORM so the row also leaves the identity map
        with self._storage_errors("delete"):
            row = self.db.get(User, user_id)
            if row is None:
                logger.debug("delete of missing user {} ignored", user_id)
                return
            self.db.delete(row)
            self.db.commit()

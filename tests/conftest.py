"""
conftest.py — Shared Test Fixtures for the Users API

Provides an in-memory SQLite database, a FastAPI TestClient wired to it,
and a factory fixture for User rows.

Business Rules:
- All tests run against an isolated in-memory DB (no real Postgres needed)
- Each test function gets fresh tables, dropped afterwards

Called by: all test files via pytest autodiscovery
Depends on: users_api.models (Base), users_api.database (get_db)
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"  # Must be set before importing users_api modules
os.environ.setdefault("APP_ENV", "test")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from users_api.models import Base, User

# ── In-memory SQLite engine ──────────────────────────────────────────

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def db_session():
    """Create all tables, yield a session, then tear down."""
    Base.metadata.create_all(bind=engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def make_user(db_session: Session):
    """Factory: insert a users row directly and return it."""

    def _make(name: str = "Alice", dob: date = date(1990, 5, 10)) -> User:
        user = User(name=name, dob=dob)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture()
def client(db_session: Session) -> TestClient:
    """FastAPI TestClient whose get_db yields the test session."""
    from users_api.database import get_db
    from users_api.main import app

    def _override_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()

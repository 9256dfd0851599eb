"""Database engine, session factory and the per-request session dependency.

Each request gets its own Session from ``get_db``; the session is closed
when the request finishes, which hands its connection back to the pool.
On PostgreSQL an optional ``statement_timeout`` bounds how long a query can
keep running after the client has gone away.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from .config import settings
from .models import Base


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "connect_args": {"connect_timeout": 10},
    }


engine = create_engine(settings.sqlalchemy_url, **_engine_kwargs(settings.sqlalchemy_url))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def statement_timeout_listener(timeout_ms: int):
    """Connect hook that sets ``statement_timeout`` on each new Postgres connection."""

    def _set_statement_timeout(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute(f"SET statement_timeout = {int(timeout_ms)}")
        cursor.close()

    return _set_statement_timeout


if engine.dialect.name == "postgresql" and settings.db_statement_timeout_ms > 0:
    event.listen(engine, "connect", statement_timeout_listener(settings.db_statement_timeout_ms))


def create_tables() -> None:
    """Create any missing tables. Alembic owns schema changes after that."""
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

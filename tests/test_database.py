"""
test_database.py — Tests for users_api/database.py

Covers the Postgres statement_timeout connect hook and the engine
options chosen per backend.

Called by: pytest
Depends on: users_api/database.py
"""

from unittest.mock import MagicMock

from users_api.database import _engine_kwargs, get_db, statement_timeout_listener


def test_statement_timeout_listener_sets_timeout():
    dbapi_conn = MagicMock()
    cursor = dbapi_conn.cursor.return_value

    statement_timeout_listener(5000)(dbapi_conn, None)

    cursor.execute.assert_called_once_with("SET statement_timeout = 5000")
    cursor.close.assert_called_once()


def test_statement_timeout_listener_coerces_to_int():
    dbapi_conn = MagicMock()
    statement_timeout_listener("250")(dbapi_conn, None)
    dbapi_conn.cursor.return_value.execute.assert_called_once_with("SET statement_timeout = 250")


def test_sqlite_engine_skips_pool_options():
    kwargs = _engine_kwargs("sqlite://")
    assert "pool_size" not in kwargs
    assert kwargs["connect_args"] == {"check_same_thread": False}


def test_postgres_engine_uses_pool_options():
    kwargs = _engine_kwargs("postgresql://u:p@db/users")
    assert kwargs["pool_pre_ping"] is True
    assert kwargs["pool_size"] == 10
    assert kwargs["connect_args"]["connect_timeout"] == 10


def test_get_db_closes_session():
    gen = get_db()
    session = next(gen)
    assert session.is_active
    gen.close()

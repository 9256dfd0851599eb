"""
test_schemas_users.py — Tests for users_api/schemas/users.py

The validation rules for create/update payloads, exercised directly
through validate_user_request() and parse_dob().

Called by: pytest
Depends on: users_api/schemas/users.py
"""

from datetime import date

import pytest

from users_api.exceptions import ValidationError
from users_api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserView,
    parse_dob,
    validate_user_request,
)


@pytest.mark.parametrize("model", [CreateUserRequest, UpdateUserRequest])
def test_valid_payload(model):
    req = validate_user_request(model, {"name": "Alice", "dob": "1990-05-10"})
    assert isinstance(req, model)
    assert req.name == "Alice"
    assert req.dob == "1990-05-10"


def test_name_length_bounds():
    validate_user_request(CreateUserRequest, {"name": "x" * 255, "dob": "1990-05-10"})
    with pytest.raises(ValidationError) as exc:
        validate_user_request(CreateUserRequest, {"name": "x" * 256, "dob": "1990-05-10"})
    assert exc.value.message.startswith("name:")


def test_name_must_be_string():
    with pytest.raises(ValidationError):
        validate_user_request(CreateUserRequest, {"name": 42, "dob": "1990-05-10"})


def test_dob_message_is_readable():
    with pytest.raises(ValidationError) as exc:
        validate_user_request(UpdateUserRequest, {"name": "Alice", "dob": "10-05-1990"})
    assert exc.value.message == "dob: dob must be formatted YYYY-MM-DD, got '10-05-1990'"
    assert exc.value.status_code == 400


def test_parse_dob():
    assert parse_dob("2000-02-29") == date(2000, 2, 29)


@pytest.mark.parametrize("raw", ["2001-02-29", "1990-13-01", "1990-05-10T00:00:00", " 1990-05-10", "1990-05-10\n"])
def test_parse_dob_rejects(raw):
    with pytest.raises(ValueError):
        parse_dob(raw)


def test_user_view_omits_missing_age():
    view = UserView(id=1, name="Alice", dob=date(1990, 5, 10))
    assert view.model_dump(mode="json", exclude_none=True) == {
        "id": 1,
        "name": "Alice",
        "dob": "1990-05-10",
    }

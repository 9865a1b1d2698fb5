"""User Schemas — record shape, immutability and payload field rules.

Tests:
    - User dumps exactly {id, name, email} and rejects non-positive ids
    - User is frozen
    - UserCreate keeps whitespace, rejects empty and non-string values, drops extras
"""

import pytest
from pydantic import ValidationError

from user_api.schemas.user import User, UserCreate


# ─── User ────────────────────────────────────────────────────────

def test_user_dumps_exactly_three_fields():
    user = User(id=1, name="John Doe", email="john@example.com")
    assert user.model_dump() == {
        "id": 1, "name": "John Doe", "email": "john@example.com",
    }


def test_user_json_preserves_non_ascii():
    user = User(id=3, name="José María", email="jose@example.com")
    assert User.model_validate_json(user.model_dump_json()) == user


def test_user_is_frozen():
    user = User(id=1, name="John Doe", email="john@example.com")
    with pytest.raises(ValidationError):
        user.email = "other@example.com"


@pytest.mark.parametrize("user_id", [0, -1])
def test_user_id_must_be_positive(user_id):
    with pytest.raises(ValidationError):
        User(id=user_id, name="A", email="a@x.io")


# ─── UserCreate ──────────────────────────────────────────────────

def test_user_create_keeps_whitespace():
    payload = UserCreate(name="  Ann  ", email=" ann@x.io ")
    assert payload.name == "  Ann  "
    assert payload.email == " ann@x.io "


@pytest.mark.parametrize("fields", [
    {"name": "", "email": "a@x.io"},
    {"name": "Ann", "email": ""},
    {"name": 1, "email": "a@x.io"},
    {"name": "Ann", "email": False},
    {"name": "Ann"},
])
def test_user_create_rejects_invalid_fields(fields):
    with pytest.raises(ValidationError):
        UserCreate.model_validate(fields)


def test_user_create_drops_extra_keys():
    payload = UserCreate.model_validate(
        {"name": "Ann", "email": "a@x.io", "id": 7},
    )
    assert payload.model_dump() == {"name": "Ann", "email": "a@x.io"}

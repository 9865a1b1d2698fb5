"""User Schemas — Pydantic models for the user record and its creation payload.

Invariants:
    - User serializes to exactly {id, name, email}
    - User is frozen: callers holding a listed record cannot mutate the store
    - UserCreate.name / email: strict non-empty strings, never stripped or folded

Design Decisions:
    - StrictStr over str: numbers and booleans are rejected, not coerced
    - No str_strip_whitespace: surrounding whitespace is part of the value
    - Extra keys ignored (pydantic default), they never reach the record
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from user_api.core.domain_types import UserId


class UserCreate(BaseModel):
    """Creation payload, both fields required and non-empty."""
    name: StrictStr = Field(min_length=1)
    email: StrictStr = Field(min_length=1)


class User(BaseModel):
    """Stored user record."""
    model_config = ConfigDict(frozen=True)

    id: UserId = Field(gt=0)
    name: str
    email: str

"""User Validation — pure mapping from a decoded payload to UserCreate or ValidationFailure.

Invariants:
    - No side effects, no IO
    - Every rejection carries the same fixed message
    - Accepted strings are returned unchanged (no strip, no case folding)
    - Email syntax is NOT checked: any non-empty string is accepted

Design Decisions:
    - Delegates field rules to the UserCreate pydantic model, but returns a value
      instead of letting ValidationError escape to the framework
"""

from pydantic import ValidationError

from user_api.core.errors import Ok, ValidationFailure
from user_api.schemas.user import UserCreate


def validate_user(payload: object) -> Ok[UserCreate] | ValidationFailure:
    """Validate a user creation payload."""
    try:
        return Ok(UserCreate.model_validate(payload))
    except ValidationError:
        return ValidationFailure()

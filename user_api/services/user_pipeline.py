"""User Pipeline — orchestrates decode -> route -> validate -> store for the user resource.

Invariants:
    - Each step returns Ok | Failure; the first Failure ends the pipeline
    - parse_request_body runs for every request, before routing (api/middleware.py)
    - Validation happens before the store call; the store is only touched after it succeeded
    - Returns exactly one outcome per call, never raises for bad input

Design Decisions:
    - Store passed in (UserRepository protocol), not imported: injectable in tests
    - Failures logged here with their code; translation to HTTP happens in api/
"""

import logging

from user_api.core.decode_body import decode_body
from user_api.core.errors import Failure, Ok, ParseFailure
from user_api.core.repository_protocols import UserRepository
from user_api.core.validate_user import validate_user
from user_api.schemas.user import User

logger = logging.getLogger(__name__)


def parse_request_body(
    content_type: str | None, raw_body: bytes, max_body_bytes: int,
) -> Ok[object] | ParseFailure:
    """Decode the request body; log and return the failure if it is unparseable."""
    decoded = decode_body(content_type, raw_body, max_body_bytes)
    if isinstance(decoded, ParseFailure):
        logger.warning(
            "Request body could not be parsed",
            extra={"error_code": decoded.code, "reason": decoded.reason},
        )
    return decoded


def list_users(store: UserRepository) -> Ok[list[User]]:
    """All users in creation order."""
    return Ok(store.list())


def create_user(store: UserRepository, payload: object) -> Ok[User] | Failure:
    """Create a user from an already decoded request payload."""
    validated = validate_user(payload)
    if isinstance(validated, Failure):
        logger.warning(
            "User payload rejected", extra={"error_code": validated.code},
        )
        return validated

    user = store.create(validated.value.name, validated.value.email)
    logger.info("User created", extra={"user_id": user.id})
    return Ok(user)

"""User Routes — list and create users in the in-memory store.

Invariants:
    - GET /api/users → 200, array of users in creation order
    - POST /api/users → 201 with the created user, 400 on validation failure,
      500 on unparseable body
    - The body was decoded before routing (api/middleware.py); the handler
      reads the payload from request.state and never parses it again

Design Decisions:
    - No pydantic body parameter: FastAPI would answer 422 with its own shape,
      bypassing the fixed error contract
    - Thin routes delegate to services/user_pipeline.py
"""

from fastapi import APIRouter, Depends, Request, status

from user_api.api.error_handlers import to_json_response
from user_api.infrastructure.user_store import UserStore, get_user_store
from user_api.services import user_pipeline

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(store: UserStore = Depends(get_user_store)):
    """List all users."""
    return to_json_response(user_pipeline.list_users(store))


@router.post("")
async def create_user(
    request: Request,
    store: UserStore = Depends(get_user_store),
):
    """Create a user from a JSON body with name and email."""
    outcome = user_pipeline.create_user(store, request.state.payload)
    return to_json_response(outcome, status.HTTP_201_CREATED)

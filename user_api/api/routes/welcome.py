"""Welcome Banner — GET / identifies the service and its version."""

from fastapi import APIRouter, Request

from user_api.core.domain_types import ServiceStatus

router = APIRouter(tags=["welcome"])

WELCOME_MESSAGE = "Welcome to CI/CD Learning App!"


@router.get("/")
async def welcome(request: Request):
    return {
        "message": WELCOME_MESSAGE,
        "version": request.app.version,
        "status": ServiceStatus.RUNNING.value,
    }

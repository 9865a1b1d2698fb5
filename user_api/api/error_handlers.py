"""Error Translation — outcomes and framework exceptions to JSON responses.

Invariants:
    - Every Failure → status = failure.http_status, body = {"error": message}
    - Framework 404 and 405 → identical "Route not found" 404 (wrong method == wrong path)
    - Exception (catch-all) → generic 500 body, never leaks internal details,
      and still carries the wildcard CORS header when configured
    - Exactly one response per request, the process keeps serving afterwards

Design Decisions:
    - Three-layer handling: explicit outcomes (to_json_response), framework HTTP
      errors (routing/static), catch-all (Exception)
    - Extracted from main.py to keep the app module small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.core.errors import Failure, InternalFailure, Ok, RouteNotFound

logger = logging.getLogger(__name__)

ALLOW_ORIGIN_HEADER = "access-control-allow-origin"

ROUTE_MISS_STATUSES = (
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
)


def to_json_response(
    outcome: Ok | Failure, success_status: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Translate a pipeline outcome into the HTTP response."""
    if isinstance(outcome, Failure):
        return failure_response(outcome)
    return JSONResponse(
        status_code=success_status, content=jsonable_encoder(outcome.value),
    )


def failure_response(failure: Failure) -> JSONResponse:
    return JSONResponse(
        status_code=failure.http_status, content=failure.to_response(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing and static-file HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Collapse unmatched routes into the uniform 404 body."""
        if exc.status_code in ROUTE_MISS_STATUSES:
            failure = RouteNotFound()
            logger.info(
                f"No route for {request.method} {request.url.path}",
                extra={"error_code": failure.code, "path": request.url.path},
            )
            return failure_response(failure)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        failure = InternalFailure()
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": failure.code, "path": request.url.path},
        )
        response = failure_response(failure)
        # Runs outside every user middleware, so CORS is applied here
        if "*" in request.app.state.settings.cors_origins:
            response.headers[ALLOW_ORIGIN_HEADER] = "*"
        return response

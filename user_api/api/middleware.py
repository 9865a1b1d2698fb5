"""HTTP Middleware — body parsing, CORS and access logging around every request.

Invariants:
    - The body is decoded for every request before routing: an unparseable JSON
      body ends in the generic 500 whatever the method and path
    - The decoded payload is left on request.state.payload for the handlers
    - With a wildcard origin configured, every response carries
      Access-Control-Allow-Origin: * (also when the request has no Origin header)
    - Preflight requests answered by CORSMiddleware before routing
    - Each request produces one access-log line with method, path, status and duration

Design Decisions:
    - Body parser registered first so it sits innermost: its 500 still passes
      through the CORS and access-log layers
    - CORSMiddleware only decorates requests that send Origin; the wildcard
      header middleware covers plain clients (curl, server-to-server, tests)
    - CORS configured from settings, not hardcoded
"""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from user_api.api.error_handlers import ALLOW_ORIGIN_HEADER, failure_response
from user_api.config import Settings
from user_api.core.errors import ParseFailure
from user_api.services.user_pipeline import parse_request_body

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Register body-parsing, CORS and access-log middleware on the app."""
    _register_body_parser(app, settings.max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if "*" in settings.cors_origins:
        _register_wildcard_origin(app)
    _register_access_log(app)


def _register_body_parser(app: FastAPI, max_body_bytes: int) -> None:

    @app.middleware("http")
    async def parse_body(request: Request, call_next):
        decoded = parse_request_body(
            request.headers.get("content-type"),
            await request.body(),
            max_body_bytes,
        )
        if isinstance(decoded, ParseFailure):
            return failure_response(decoded)
        request.state.payload = decoded.value
        return await call_next(request)


def _register_wildcard_origin(app: FastAPI) -> None:

    @app.middleware("http")
    async def wildcard_origin(request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault(ALLOW_ORIGIN_HEADER, "*")
        return response


def _register_access_log(app: FastAPI) -> None:

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response

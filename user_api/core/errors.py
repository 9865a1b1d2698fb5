"""Outcome Taxonomy — explicit success/failure values for every pipeline step.

Invariants:
    - Every failure has a code (str), category (ErrorCategory), severity (ErrorSeverity)
      and an HTTP status
    - to_response() produces exactly {"error": message}, nothing else
    - ParseFailure.reason is for logs only, never part of the client-facing body
    - Failures are values, not exceptions: steps return Ok | Failure

Design Decisions:
    - Single Failure base: the error translator maps every subclass uniformly
      (ADR: uniform error shape)
    - Parse errors are 500, missing fields are 400: observable contract,
      do not "fix" one into the other
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

VALIDATION_MESSAGE = "Name and email are required"
GENERIC_FAILURE_MESSAGE = "Something went wrong!"
ROUTE_NOT_FOUND_MESSAGE = "Route not found"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level failure categories."""
    VALIDATION = "validation"
    PARSE = "parse"
    ROUTE_NOT_FOUND = "route_not_found"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful step result."""
    value: T


@dataclass(frozen=True)
class Failure:
    """Base for all request failures."""
    message: str
    code: str
    category: ErrorCategory
    http_status: int
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def to_response(self) -> dict:
        """Convert to the client-facing JSON body."""
        return {"error": self.message}


# ─── Client faults (400-level) ──────────────────────────────────

@dataclass(frozen=True)
class ValidationFailure(Failure):
    """Creation payload is missing name or email."""
    message: str = VALIDATION_MESSAGE
    code: str = "VALIDATION_ERROR"
    category: ErrorCategory = ErrorCategory.VALIDATION
    http_status: int = 400
    severity: ErrorSeverity = ErrorSeverity.WARNING


@dataclass(frozen=True)
class RouteNotFound(Failure):
    """No handler for the method + path pair."""
    message: str = ROUTE_NOT_FOUND_MESSAGE
    code: str = "ROUTE_NOT_FOUND"
    category: ErrorCategory = ErrorCategory.ROUTE_NOT_FOUND
    http_status: int = 404
    severity: ErrorSeverity = ErrorSeverity.INFO


# ─── Server faults (500-level) ──────────────────────────────────

@dataclass(frozen=True)
class ParseFailure(Failure):
    """Request body could not be decoded as the declared content type."""
    message: str = GENERIC_FAILURE_MESSAGE
    code: str = "PARSE_ERROR"
    category: ErrorCategory = ErrorCategory.PARSE
    http_status: int = 500
    severity: ErrorSeverity = ErrorSeverity.WARNING
    reason: str = field(default="", compare=False)


@dataclass(frozen=True)
class InternalFailure(Failure):
    """Unexpected exception while handling a request."""
    message: str = GENERIC_FAILURE_MESSAGE
    code: str = "INTERNAL_ERROR"
    category: ErrorCategory = ErrorCategory.INTERNAL
    http_status: int = 500
    severity: ErrorSeverity = ErrorSeverity.CRITICAL

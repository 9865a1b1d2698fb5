"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps a positive int, never reused within a process
    - Seed records are fixed and always occupy ids 1 and 2

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Seed Data ───────────────────────────────────────────────────

SEED_USERS: tuple[tuple[str, str], ...] = (
    ("John Doe", "john@example.com"),
    ("Jane Smith", "jane@example.com"),
)


# ─── Enums ───────────────────────────────────────────────────────

class ServiceStatus(str, Enum):
    """Status strings reported by the welcome and liveness endpoints."""
    RUNNING = "running"
    HEALTHY = "healthy"

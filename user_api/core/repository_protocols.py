"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - The user collection is accessed only through UserRepository
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Sync methods: the in-memory store does no IO, so nothing here suspends
      between reading the id counter and appending the record
"""

from typing import Protocol

from user_api.schemas.user import User


class UserRepository(Protocol):
    """Contract for user storage, implemented by infrastructure/user_store.py."""
    def list(self) -> list[User]: ...
    def create(self, name: str, email: str) -> User: ...

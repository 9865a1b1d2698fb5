"""In-Memory User Store — the only owner of user records and the id sequence.

Invariants:
    - Ids are allocated by a single increment-and-read under the lock: pairwise
      distinct, strictly increasing in completion order, never reused
    - list() returns a new list each call; records are frozen models
    - create() performs no validation: callers pass already-validated fields
    - State lives for the process lifetime only

Design Decisions:
    - Explicit object passed by dependency injection over a module-level dict
      (tests get a fresh store via app.dependency_overrides)
    - threading.Lock even on a single event loop: uniqueness holds if handlers
      are ever moved onto a thread pool or sync endpoints
"""

import logging
import threading

from fastapi import Request

from user_api.core.domain_types import SEED_USERS, UserId
from user_api.schemas.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Ordered, append-only collection of users with a monotonic id counter."""

    def __init__(self):
        self._users: list[User] = []
        self._last_id = 0
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "UserStore":
        """Build a store holding the two fixed seed users (ids 1 and 2)."""
        store = cls()
        for name, email in SEED_USERS:
            store.create(name, email)
        return store

    def list(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def create(self, name: str, email: str) -> User:
        with self._lock:
            self._last_id += 1
            user = User(id=UserId(self._last_id), name=name, email=email)
            self._users.append(user)
        logger.debug("User stored", extra={"user_id": user.id})
        return user

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)


def get_user_store(request: Request) -> UserStore:
    """FastAPI dependency: the store owned by the running app."""
    return request.app.state.user_store

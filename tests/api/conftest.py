"""API test fixtures — FastAPI test client with an isolated user store.

Invariants:
    - Every test gets a freshly seeded UserStore (ids 1 and 2 taken, next is 3)
    - get_user_store dependency overridden so tests never share state

Design Decisions:
    - httpx ASGITransport: in-process, no sockets, same app object uvicorn serves
    - build_client fixture for tests that need their own Settings (static dir, limits)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from user_api.infrastructure.user_store import UserStore, get_user_store
from user_api.main import app


@pytest.fixture
def store():
    return UserStore.seeded()


@pytest.fixture
async def client(store):
    """Test client for the module-level app with the store overridden."""
    app.dependency_overrides[get_user_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def build_client():
    """Factory: async client for an app built by the test.

    Usage: async with build_client(create_app(settings)) as c: ...
    """
    def _build(target_app, raise_app_exceptions: bool = True) -> AsyncClient:
        return AsyncClient(
            transport=ASGITransport(
                app=target_app, raise_app_exceptions=raise_app_exceptions,
            ),
            base_url="http://test",
        )
    return _build

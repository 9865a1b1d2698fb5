"""Middleware — CORS allow-all header and static file serving.

Invariants:
    - Access-Control-Allow-Origin: * on every response, with or without Origin
    - CORS preflight answered for the user route
    - Files in the static directory are served; API routes take precedence
    - Missing static files fall through to the uniform 404 body
"""

import pytest

from user_api.config import Settings
from user_api.infrastructure.user_store import get_user_store
from user_api.main import create_app


@pytest.mark.parametrize("method, path", [
    ("GET", "/"),
    ("GET", "/health"),
    ("GET", "/api/users"),
    ("GET", "/nope"),
])
async def test_allow_origin_header_without_origin(client, method, path):
    res = await client.request(method, path)
    assert res.headers["access-control-allow-origin"] == "*"


async def test_allow_origin_header_on_failures(client):
    res = await client.post("/api/users", json={})
    assert res.status_code == 400
    assert res.headers["access-control-allow-origin"] == "*"


async def test_allow_origin_header_with_origin(client):
    res = await client.get("/", headers={"Origin": "https://example.org"})
    assert res.headers["access-control-allow-origin"] == "*"


async def test_preflight_for_user_route(client):
    res = await client.options(
        "/api/users",
        headers={
            "Origin": "https://example.org",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
    assert "POST" in res.headers["access-control-allow-methods"]


async def test_restricted_origins_skip_wildcard(build_client):
    app = create_app(Settings(
        static_dir="tests/.no-static-dir",
        cors_origins=["https://app.example.org"],
    ))
    async with build_client(app) as c:
        res = await c.get("/")
        assert "access-control-allow-origin" not in res.headers
        allowed = await c.get("/", headers={"Origin": "https://app.example.org"})
        assert allowed.headers["access-control-allow-origin"] == "https://app.example.org"


async def test_static_files_served(tmp_path, build_client):
    (tmp_path / "test.html").write_text("<html><body>Test</body></html>")
    (tmp_path / "index.html").write_text("<html>static index</html>")

    app = create_app(Settings(static_dir=str(tmp_path)))
    async with build_client(app) as c:
        res = await c.get("/test.html")
        assert res.status_code == 200
        assert "Test" in res.text
        assert res.headers["access-control-allow-origin"] == "*"

        root = await c.get("/")
        assert root.json()["message"] == "Welcome to CI/CD Learning App!"

        users = await c.get("/api/users")
        assert users.status_code == 200

        missing = await c.get("/missing.css")
        assert missing.status_code == 404
        assert missing.json() == {"error": "Route not found"}

        wrong_method = await c.put("/api/users", json={})
        assert wrong_method.status_code == 404
        assert wrong_method.json() == {"error": "Route not found"}


async def test_allow_origin_header_on_unexpected_exception(build_client):
    class _BrokenStore:
        def list(self):
            raise RuntimeError("boom")

    app = create_app(Settings(static_dir="tests/.no-static-dir"))
    app.dependency_overrides[get_user_store] = lambda: _BrokenStore()

    async with build_client(app, raise_app_exceptions=False) as c:
        res = await c.get("/api/users")
        assert res.status_code == 500
        assert res.headers["access-control-allow-origin"] == "*"


async def test_unexpected_exception_with_restricted_origins_has_no_wildcard(build_client):
    class _BrokenStore:
        def list(self):
            raise RuntimeError("boom")

    app = create_app(Settings(
        static_dir="tests/.no-static-dir",
        cors_origins=["https://app.example.org"],
    ))
    app.dependency_overrides[get_user_store] = lambda: _BrokenStore()

    async with build_client(app, raise_app_exceptions=False) as c:
        res = await c.get("/api/users")
        assert res.status_code == 500
        assert "access-control-allow-origin" not in res.headers

"""Composition root tests on the in-memory backend."""

from falcon.testing import TestClient

from snipauth.config import Settings
from snipauth.main import create_snipauth_app


def _client() -> TestClient:
    settings = Settings(_env_file=None, storage_backend="memory", keycloak_client_secret="")
    return TestClient(create_snipauth_app(settings))


def test_memory_app_serves_health() -> None:
    r = _client().simulate_get("/v1/health")
    assert r.status_code == 200


def test_memory_app_grant_and_check() -> None:
    client = _client()

    grant = client.simulate_post(
        "/v1/authorization/permissions",
        json={
            "owner_id": "anonymous",
            "grantee_id": "user1",
            "resource_id": "snip1",
            "can_read": True,
        },
    )
    check = client.simulate_post(
        "/v1/authorization/check",
        json={
            "user_id": "user1",
            "resource_id": "snip1",
            "owner_id": "anonymous",
            "action": "read",
        },
    )

    assert grant.status_code == 200
    assert check.json == {"allowed": True}


def test_cors_preflight() -> None:
    r = _client().simulate_options(
        "/v1/authorization/check", headers={"Origin": "http://localhost:3000"}
    )
    assert r.status_code == 200
    assert r.headers["Access-Control-Allow-Origin"] == "http://localhost:3000"


def test_memory_app_registered_snippet_resolves_owner() -> None:
    client = _client()

    before = client.simulate_post("/v1/snippets/snip1/check", json={"action": "delete"})
    register = client.simulate_post("/v1/snippets", json={"id": "snip1"})
    after = client.simulate_post("/v1/snippets/snip1/check", json={"action": "delete"})

    assert before.json == {"allowed": False}
    assert register.status_code == 201
    assert register.json["owner_id"] == "anonymous"
    assert after.json == {"allowed": True}


def test_memory_app_ready() -> None:
    r = _client().simulate_get("/v1/health/ready")
    assert r.status_code == 200
    assert r.json["status"] == "ready"

"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from snipauth.interfaces.api.app import create_app
from snipauth.interfaces.api.middleware.auth import AuthMiddleware, RequestUser


class AuthBypassMiddleware:
    """Middleware that sets context.user from the X-Test-User header for testing."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        req.context.user = RequestUser(user_id=user_id) if user_id else None


@pytest.fixture
def app(authorization_service, snippet_service):
    """Falcon ASGI app over in-memory stores."""
    return create_app(authorization_service, snippet_service, [AuthBypassMiddleware()])


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def anonymous_client(authorization_service, snippet_service) -> TestClient:
    """Client whose app uses the real AuthMiddleware without a token provider."""
    return TestClient(
        create_app(authorization_service, snippet_service, [AuthMiddleware(None)])
    )

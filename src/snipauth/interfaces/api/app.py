"""Falcon ASGI application."""

import logging
from collections.abc import Awaitable, Callable

import falcon.asgi

from snipauth.application.services.authorization_service import AuthorizationService
from snipauth.application.services.snippet_service import SnippetService
from snipauth.interfaces.api.resources.authorization import (
    PermissionCheckResource,
    PermissionRevokeResource,
    PermissionsResource,
    ResourcePermissionsResource,
    UserPermissionsResource,
)
from snipauth.interfaces.api.resources.health import HealthResource
from snipauth.interfaces.api.resources.snippets import (
    SnippetCheckResource,
    SnippetResource,
    SnippetsResource,
)

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log and answer 500 for anything the resources did not map."""
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    authorization_service: AuthorizationService,
    snippet_service: SnippetService,
    middleware: list | None = None,
    readiness: Callable[[], Awaitable[bool]] | None = None,
) -> falcon.asgi.App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)

    health = HealthResource(readiness)
    user_permissions = UserPermissionsResource(authorization_service)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/authorization/check", PermissionCheckResource(authorization_service))
    app.add_route("/v1/authorization/permissions", PermissionsResource(authorization_service))
    app.add_route(
        "/v1/authorization/permissions/{resource_id}/{user_id}",
        PermissionRevokeResource(authorization_service),
    )
    app.add_route(
        "/v1/authorization/resources/{resource_id}/permissions",
        ResourcePermissionsResource(authorization_service),
    )
    app.add_route("/v1/authorization/users/{user_id}/permissions", user_permissions)
    app.add_route(
        "/v1/authorization/users/{user_id}/resources", user_permissions, suffix="resources"
    )
    app.add_route("/v1/snippets", SnippetsResource(snippet_service))
    app.add_route("/v1/snippets/{snippet_id}", SnippetResource(snippet_service))
    app.add_route("/v1/snippets/{snippet_id}/check", SnippetCheckResource(snippet_service))
    return app

"""Application entry point and composition root."""

import logging

import falcon.asgi

from snipauth import __version__
from snipauth.application.services.authorization_service import AuthorizationService
from snipauth.application.services.snippet_service import SnippetService
from snipauth.application.use_cases.permission.check_permission import CheckPermissionUseCase
from snipauth.application.use_cases.permission.check_snippet_permission import (
    CheckSnippetPermissionUseCase,
)
from snipauth.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from snipauth.application.use_cases.permission.query_permissions import (
    PermissionQueryService,
)
from snipauth.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from snipauth.application.use_cases.snippet.delete_snippet import DeleteSnippetUseCase
from snipauth.application.use_cases.snippet.register_snippet import RegisterSnippetUseCase
from snipauth.config import Settings, get_settings
from snipauth.infrastructure.auth.keycloak_provider import KeycloakProvider
from snipauth.infrastructure.persistence.memory.unit_of_work import create_memory_uow_factory
from snipauth.infrastructure.persistence.postgres.connection import (
    create_pool,
    create_readiness_check,
)
from snipauth.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from snipauth.interfaces.api.app import create_app
from snipauth.interfaces.api.middleware.auth import AuthMiddleware
from snipauth.interfaces.api.middleware.cors import CORSMiddleware
from snipauth.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logger from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_authorization_service(unit_of_work_factory) -> AuthorizationService:
    """Wire the permission use cases over one UnitOfWork factory."""
    return AuthorizationService(
        permission_checker=CheckPermissionUseCase(unit_of_work_factory),
        grant_permission=GrantPermissionUseCase(unit_of_work_factory),
        revoke_permission=RevokePermissionUseCase(unit_of_work_factory),
        permission_queries=PermissionQueryService(unit_of_work_factory),
    )


def build_snippet_service(unit_of_work_factory) -> SnippetService:
    """Wire the snippet use cases over one UnitOfWork factory."""
    checker = CheckPermissionUseCase(unit_of_work_factory)
    return SnippetService(
        check_snippet_permission=CheckSnippetPermissionUseCase(unit_of_work_factory, checker),
        register_snippet=RegisterSnippetUseCase(unit_of_work_factory),
        delete_snippet=DeleteSnippetUseCase(unit_of_work_factory, checker),
    )


def create_snipauth_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings)

    middleware = []
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    middleware.append(CORSMiddleware(cors_origins))

    readiness = None
    if settings.storage_backend == "memory":
        uow_factory = create_memory_uow_factory()
    else:
        pool = create_pool(
            settings.database_url,
            min_size=settings.database_pool_min_size,
            max_size=settings.database_pool_max_size,
        )
        uow_factory = create_uow_factory(pool)
        readiness = create_readiness_check(pool)
        middleware.append(PoolLifespanMiddleware(pool))

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    middleware.append(AuthMiddleware(keycloak))

    authorization_service = build_authorization_service(uow_factory)
    snippet_service = build_snippet_service(uow_factory)

    logger.info(
        "snipauth v%s starting (storage=%s, environment=%s)",
        __version__,
        settings.storage_backend,
        settings.environment,
    )
    return create_app(authorization_service, snippet_service, middleware, readiness)


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_snipauth_app(settings), host=settings.host, port=settings.port)

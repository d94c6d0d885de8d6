"""Pytest fixtures for snipauth tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

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
from snipauth.domain.entities import Permission
from snipauth.infrastructure.persistence.memory.permission_repository import (
    InMemoryPermissionRepository,
)
from snipauth.infrastructure.persistence.memory.snippet_repository import (
    InMemorySnippetRepository,
)
from snipauth.infrastructure.persistence.memory.unit_of_work import create_memory_uow_factory


class CountingPermissionRepository(InMemoryPermissionRepository):
    """In-memory permission repository that counts pair lookups and writes."""

    def __init__(self) -> None:
        super().__init__()
        self.lookups = 0
        self.saves = 0

    async def find_by_user_and_resource(
        self, user_id: str, resource_id: str
    ) -> Permission | None:
        self.lookups += 1
        return await super().find_by_user_and_resource(user_id, resource_id)

    async def save(self, permission: Permission) -> Permission:
        self.saves += 1
        return await super().save(permission)


# --- Fixtures ---


@pytest.fixture
def permission_repo() -> CountingPermissionRepository:
    """Fresh in-memory permission store for each test."""
    return CountingPermissionRepository()


@pytest.fixture
def snippet_repo() -> InMemorySnippetRepository:
    """Fresh in-memory snippet store for each test."""
    return InMemorySnippetRepository()


@pytest.fixture
def uow_factory(permission_repo, snippet_repo):
    """Factory returning async context manager over the shared in-memory stores."""
    return create_memory_uow_factory(permission_repo, snippet_repo)


@pytest.fixture
def checker(uow_factory) -> CheckPermissionUseCase:
    return CheckPermissionUseCase(uow_factory)


@pytest.fixture
def grant_use_case(uow_factory) -> GrantPermissionUseCase:
    return GrantPermissionUseCase(uow_factory)


@pytest.fixture
def revoke_use_case(uow_factory) -> RevokePermissionUseCase:
    return RevokePermissionUseCase(uow_factory)


@pytest.fixture
def query_service(uow_factory) -> PermissionQueryService:
    return PermissionQueryService(uow_factory)


@pytest.fixture
def authorization_service(
    checker, grant_use_case, revoke_use_case, query_service
) -> AuthorizationService:
    return AuthorizationService(
        permission_checker=checker,
        grant_permission=grant_use_case,
        revoke_permission=revoke_use_case,
        permission_queries=query_service,
    )


@pytest.fixture
def snippet_service(uow_factory, checker) -> SnippetService:
    return SnippetService(
        check_snippet_permission=CheckSnippetPermissionUseCase(uow_factory, checker),
        register_snippet=RegisterSnippetUseCase(uow_factory),
        delete_snippet=DeleteSnippetUseCase(uow_factory, checker),
    )


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - returns True by default."""
    mock = AsyncMock()
    mock.is_allowed.return_value = True
    return mock

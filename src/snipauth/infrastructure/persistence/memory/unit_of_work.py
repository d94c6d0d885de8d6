"""In-memory Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from snipauth.infrastructure.persistence.memory.permission_repository import (
    InMemoryPermissionRepository,
)
from snipauth.infrastructure.persistence.memory.snippet_repository import (
    InMemorySnippetRepository,
)


class InMemoryUnitOfWork:
    """Unit of Work over shared in-memory repositories. Writes apply immediately."""

    def __init__(
        self,
        permissions: InMemoryPermissionRepository,
        snippets: InMemorySnippetRepository,
    ) -> None:
        self._permissions = permissions
        self._snippets = snippets

    @property
    def permissions(self) -> InMemoryPermissionRepository:
        return self._permissions

    @property
    def snippets(self) -> InMemorySnippetRepository:
        return self._snippets

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def create_memory_uow_factory(
    permissions: InMemoryPermissionRepository | None = None,
    snippets: InMemorySnippetRepository | None = None,
) -> object:
    """Create UnitOfWork factory whose units all share the same repositories."""
    permissions = permissions if permissions is not None else InMemoryPermissionRepository()
    snippets = snippets if snippets is not None else InMemorySnippetRepository()

    @asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryUnitOfWork]:
        yield InMemoryUnitOfWork(permissions, snippets)

    return factory

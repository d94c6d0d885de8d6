"""Snippet service - ownership records and decisions against them."""

from snipauth.application.use_cases.permission.check_snippet_permission import (
    CheckSnippetPermissionUseCase,
)
from snipauth.application.use_cases.snippet.delete_snippet import DeleteSnippetUseCase
from snipauth.application.use_cases.snippet.register_snippet import RegisterSnippetUseCase
from snipauth.domain.entities import Snippet


class SnippetService:
    """Facade over snippet register, delete and owner-resolving check."""

    def __init__(
        self,
        check_snippet_permission: CheckSnippetPermissionUseCase,
        register_snippet: RegisterSnippetUseCase,
        delete_snippet: DeleteSnippetUseCase,
    ) -> None:
        self._check = check_snippet_permission
        self._register = register_snippet
        self._delete = delete_snippet

    async def is_allowed(self, user_id: str, snippet_id: str, action: str) -> bool:
        return await self._check.is_allowed(user_id, snippet_id, action)

    async def register_snippet(self, owner_id: str, snippet_id: str) -> Snippet:
        return await self._register.execute(owner_id, snippet_id)

    async def delete_snippet(self, requester_id: str, snippet_id: str) -> None:
        await self._delete.execute(requester_id, snippet_id)

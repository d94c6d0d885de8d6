"""Snippet repository port."""

from typing import Protocol

from snipauth.domain.entities import Snippet


class SnippetRepository(Protocol):
    """Port for snippet ownership records."""

    async def get_by_id(self, snippet_id: str) -> Snippet | None: ...

    async def create(self, snippet: Snippet) -> Snippet:
        """Store a new snippet. Raises ConflictError if the id is taken."""
        ...

    async def delete(self, snippet_id: str) -> None: ...

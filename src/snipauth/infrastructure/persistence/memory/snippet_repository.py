"""In-memory snippet repository implementation."""

from dataclasses import replace

from snipauth.domain.entities import Snippet
from snipauth.domain.exceptions import ConflictError


class InMemorySnippetRepository:
    """Snippet ownership records held in a dict."""

    def __init__(self) -> None:
        self._by_id: dict[str, Snippet] = {}

    async def get_by_id(self, snippet_id: str) -> Snippet | None:
        snippet = self._by_id.get(snippet_id)
        return replace(snippet) if snippet else None

    async def create(self, snippet: Snippet) -> Snippet:
        if snippet.id in self._by_id:
            raise ConflictError("Snippet already exists")
        self._by_id[snippet.id] = replace(snippet)
        return snippet

    async def delete(self, snippet_id: str) -> None:
        self._by_id.pop(snippet_id, None)

"""PostgreSQL snippet repository implementation."""

from psycopg import AsyncConnection

from snipauth.domain.entities import Snippet
from snipauth.domain.exceptions import ConflictError


class PostgresSnippetRepository:
    """Snippet repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, snippet_id: str) -> Snippet | None:
        """Get snippet by id."""
        cur = await self._conn.execute(
            "SELECT id, owner_id FROM snippet WHERE id = %s",
            (snippet_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Snippet(id=r[0], owner_id=r[1])

    async def create(self, snippet: Snippet) -> Snippet:
        """Create snippet. Raises ConflictError if the id is taken."""
        cur = await self._conn.execute(
            "INSERT INTO snippet (id, owner_id) VALUES (%s, %s) "
            "ON CONFLICT (id) DO NOTHING RETURNING id",
            (snippet.id, snippet.owner_id),
        )
        if not await cur.fetchone():
            raise ConflictError("Snippet already exists")
        return snippet

    async def delete(self, snippet_id: str) -> None:
        """Delete snippet row only. Grants on it are removed by the caller."""
        await self._conn.execute(
            "DELETE FROM snippet WHERE id = %s",
            (snippet_id,),
        )

"""PostgreSQL permission repository implementation."""

from psycopg import AsyncConnection

from snipauth.domain.entities import Permission

_COLUMNS = "id, user_id, resource_id, can_read, can_edit"


def _row_to_permission(r: tuple) -> Permission:
    return Permission(
        id=r[0],
        user_id=r[1],
        resource_id=r[2],
        can_read=r[3],
        can_edit=r[4],
    )


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def find_by_user_and_resource(
        self, user_id: str, resource_id: str
    ) -> Permission | None:
        """Get grant for user on resource."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE user_id = %s AND resource_id = %s",
            (user_id, resource_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_permission(r)

    async def save(self, permission: Permission) -> Permission:
        """Insert or update grant.

        Inserts upsert on (user_id, resource_id) so a concurrent insert for the
        same pair becomes an update of the existing row. An update whose row
        has been deleted in the meantime is written back through the same upsert.
        """
        if permission.id is not None:
            cur = await self._conn.execute(
                "UPDATE permission SET user_id=%s, resource_id=%s, can_read=%s, can_edit=%s "
                f"WHERE id=%s RETURNING {_COLUMNS}",
                (
                    permission.user_id,
                    permission.resource_id,
                    permission.can_read,
                    permission.can_edit,
                    permission.id,
                ),
            )
            r = await cur.fetchone()
            if r:
                return _row_to_permission(r)
        return await self._upsert(permission)

    async def _upsert(self, permission: Permission) -> Permission:
        cur = await self._conn.execute(
            "INSERT INTO permission (user_id, resource_id, can_read, can_edit) "
            "VALUES (%s, %s, %s, %s) "
            "ON CONFLICT (user_id, resource_id) DO UPDATE "
            "SET can_read = EXCLUDED.can_read, can_edit = EXCLUDED.can_edit "
            f"RETURNING {_COLUMNS}",
            (
                permission.user_id,
                permission.resource_id,
                permission.can_read,
                permission.can_edit,
            ),
        )
        r = await cur.fetchone()
        return _row_to_permission(r)

    async def delete_by_user_and_resource(self, user_id: str, resource_id: str) -> None:
        """Delete grant for user on resource."""
        await self._conn.execute(
            "DELETE FROM permission WHERE user_id = %s AND resource_id = %s",
            (user_id, resource_id),
        )

    async def delete_all_by_resource(self, resource_id: str) -> None:
        """Delete every grant on resource."""
        await self._conn.execute(
            "DELETE FROM permission WHERE resource_id = %s",
            (resource_id,),
        )

    async def find_all_by_resource(self, resource_id: str) -> list[Permission]:
        """List grants on resource."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE resource_id = %s",
            (resource_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    async def find_all_by_user(self, user_id: str) -> list[Permission]:
        """List grants held by user."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE user_id = %s",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

"""In-memory permission repository implementation."""

from dataclasses import replace
from itertools import count

from snipauth.domain.entities import Permission


class InMemoryPermissionRepository:
    """Permission repository keyed by (user_id, resource_id).

    Rows are copied in and out, so callers never hold references to stored
    state. Inserting a pair that already exists updates that row and keeps
    its id, which makes concurrent first grants converge on one row.
    """

    def __init__(self) -> None:
        self._by_key: dict[tuple[str, str], Permission] = {}
        self._ids = count(1)

    async def find_by_user_and_resource(
        self, user_id: str, resource_id: str
    ) -> Permission | None:
        """Get grant for user on resource."""
        perm = self._by_key.get((user_id, resource_id))
        return replace(perm) if perm else None

    async def save(self, permission: Permission) -> Permission:
        """Insert (assigning an id) or fully update the row for the pair."""
        key = (permission.user_id, permission.resource_id)
        if permission.id is None:
            current = self._by_key.get(key)
            new_id = current.id if current else next(self._ids)
            stored = replace(permission, id=new_id)
        else:
            stored = replace(permission)
        self._by_key[key] = stored
        return replace(stored)

    async def delete_by_user_and_resource(self, user_id: str, resource_id: str) -> None:
        """Delete grant for user on resource, if any."""
        self._by_key.pop((user_id, resource_id), None)

    async def delete_all_by_resource(self, resource_id: str) -> None:
        """Delete every grant on resource."""
        for key in [k for k in self._by_key if k[1] == resource_id]:
            del self._by_key[key]

    async def find_all_by_resource(self, resource_id: str) -> list[Permission]:
        """List grants on resource."""
        return [replace(p) for p in self._by_key.values() if p.resource_id == resource_id]

    async def find_all_by_user(self, user_id: str) -> list[Permission]:
        """List grants held by user."""
        return [replace(p) for p in self._by_key.values() if p.user_id == user_id]

    def clear(self) -> None:
        """Drop all rows and restart id assignment at 1."""
        self._by_key.clear()
        self._ids = count(1)

"""Permission repository port."""

from typing import Protocol

from snipauth.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for grant persistence. At most one row per (user_id, resource_id)."""

    async def find_by_user_and_resource(
        self, user_id: str, resource_id: str
    ) -> Permission | None: ...

    async def save(self, permission: Permission) -> Permission: ...

    async def delete_by_user_and_resource(self, user_id: str, resource_id: str) -> None: ...

    async def find_all_by_resource(self, resource_id: str) -> list[Permission]: ...

    async def find_all_by_user(self, user_id: str) -> list[Permission]: ...

    async def delete_all_by_resource(self, resource_id: str) -> None: ...

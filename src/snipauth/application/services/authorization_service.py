"""Authorization service - the operations a controller consumes."""

from snipauth.application.dto.permission_dto import (
    CheckPermissionInput,
    GrantPermissionInput,
    PermissionView,
)
from snipauth.application.ports import PermissionChecker
from snipauth.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from snipauth.application.use_cases.permission.query_permissions import (
    PermissionQueryService,
)
from snipauth.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)


class AuthorizationService:
    """Facade over checker, grant, revoke and query use cases."""

    def __init__(
        self,
        permission_checker: PermissionChecker,
        grant_permission: GrantPermissionUseCase,
        revoke_permission: RevokePermissionUseCase,
        permission_queries: PermissionQueryService,
    ) -> None:
        self._checker = permission_checker
        self._grant = grant_permission
        self._revoke = revoke_permission
        self._queries = permission_queries

    async def check_permission(self, request: CheckPermissionInput) -> bool:
        return await self._checker.is_allowed(request)

    async def grant_permission(self, request: GrantPermissionInput) -> PermissionView:
        return await self._grant.execute(request)

    async def revoke_permission(self, user_id: str, resource_id: str, requester_id: str) -> None:
        await self._revoke.execute(user_id, resource_id, requester_id)

    async def get_resource_permissions(
        self, resource_id: str, requester_id: str
    ) -> list[PermissionView]:
        return await self._queries.get_resource_permissions(resource_id, requester_id)

    async def get_user_permissions(self, user_id: str) -> list[PermissionView]:
        return await self._queries.get_user_permissions(user_id)

    async def get_resources_by_permission(self, user_id: str, level: str) -> list[str]:
        return await self._queries.get_resources_by_permission(user_id, level)

"""Read-only permission views."""

from snipauth.application.dto.permission_dto import PermissionView
from snipauth.application.mappers.permission_mapper import PermissionMapper
from snipauth.domain.value_objects import PermissionLevel


class PermissionQueryService:
    """Aggregate views over stored grants. Owner-implicit access is never listed."""

    def __init__(
        self,
        unit_of_work_factory: type,
        mapper: PermissionMapper | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._mapper = mapper or PermissionMapper()

    async def get_resource_permissions(
        self, resource_id: str, requester_id: str
    ) -> list[PermissionView]:
        """All grants on a resource. requester_id is not used for filtering."""
        async with self._uow_factory() as uow:
            grants = await uow.permissions.find_all_by_resource(resource_id)
        return self._mapper.to_views(grants)

    async def get_user_permissions(self, user_id: str) -> list[PermissionView]:
        """All grants held by a user."""
        async with self._uow_factory() as uow:
            grants = await uow.permissions.find_all_by_user(user_id)
        return self._mapper.to_views(grants)

    async def get_resources_by_permission(self, user_id: str, level: str) -> list[str]:
        """Resource ids where the user's stored flag for level ('read' or 'edit') is set."""
        parsed = PermissionLevel.parse(level)
        async with self._uow_factory() as uow:
            grants = await uow.permissions.find_all_by_user(user_id)
        if parsed is PermissionLevel.READ:
            return [g.resource_id for g in grants if g.can_read]
        return [g.resource_id for g in grants if g.can_edit]

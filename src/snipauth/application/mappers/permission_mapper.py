"""Storage entity to response DTO mapping."""

from snipauth.application.dto.permission_dto import PermissionView
from snipauth.domain.entities import Permission


class PermissionMapper:
    """Maps Permission entities to PermissionView. No validation, no I/O."""

    def to_view(self, permission: Permission) -> PermissionView:
        return PermissionView(
            id=permission.id,
            user_id=permission.user_id,
            resource_id=permission.resource_id,
            can_read=permission.can_read,
            can_edit=permission.can_edit,
        )

    def to_views(self, permissions: list[Permission]) -> list[PermissionView]:
        return [self.to_view(p) for p in permissions]

"""Permission checker port - single access decision."""

from typing import Protocol

from snipauth.application.dto.permission_dto import CheckPermissionInput


class PermissionChecker(Protocol):
    """Port for deciding one (user, resource, action) triple."""

    async def is_allowed(self, request: CheckPermissionInput) -> bool: ...

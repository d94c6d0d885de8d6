"""Grant permission use case."""

import logging

from snipauth.application.dto.permission_dto import GrantPermissionInput, PermissionView
from snipauth.application.mappers.permission_mapper import PermissionMapper
from snipauth.domain.entities import Permission
from snipauth.domain.exceptions import AuthorizationError, ValidationError

logger = logging.getLogger(__name__)


class GrantPermissionUseCase:
    """Create or overwrite the grant of a non-owner on a snippet."""

    def __init__(
        self,
        unit_of_work_factory: type,
        mapper: PermissionMapper | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._mapper = mapper or PermissionMapper()

    async def execute(self, request: GrantPermissionInput) -> PermissionView:
        """Grant flags to grantee. Only the owner may grant, and never to themselves.

        An existing grant for the pair has both flags replaced and keeps its id.
        """
        self._validate(request)

        async with self._uow_factory() as uow:
            existing = await uow.permissions.find_by_user_and_resource(
                request.grantee_id, request.resource_id
            )
            if existing:
                existing.can_read = request.can_read
                existing.can_edit = request.can_edit
                permission = existing
            else:
                permission = Permission(
                    user_id=request.grantee_id,
                    resource_id=request.resource_id,
                    can_read=request.can_read,
                    can_edit=request.can_edit,
                )
            saved = await uow.permissions.save(permission)

        logger.info(
            "Granted read=%s edit=%s on %s to %s (by %s)",
            saved.can_read,
            saved.can_edit,
            saved.resource_id,
            saved.user_id,
            request.requester_id,
        )
        return self._mapper.to_view(saved)

    def _validate(self, request: GrantPermissionInput) -> None:
        if request.requester_id != request.owner_id:
            logger.warning(
                "Rejected grant on %s: requester %s is not the owner",
                request.resource_id,
                request.requester_id,
            )
            raise AuthorizationError("Only the owner can grant permissions")
        if request.grantee_id == request.owner_id:
            raise ValidationError("Cannot grant permissions to the owner")

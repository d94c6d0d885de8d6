"""Revoke permission use case."""

import logging

from snipauth.domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class RevokePermissionUseCase:
    """Delete the grant of a user on a snippet."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, resource_id: str, requester_id: str) -> None:
        """Revoke grant for user on resource.

        requester_id is recorded but not checked against the owner at this layer.
        """
        async with self._uow_factory() as uow:
            grant = await uow.permissions.find_by_user_and_resource(user_id, resource_id)
            if not grant:
                raise NotFoundError("Permission not found")
            await uow.permissions.delete_by_user_and_resource(user_id, resource_id)

        logger.info("Revoked %s on %s (by %s)", user_id, resource_id, requester_id)

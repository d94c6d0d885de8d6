"""Check permission use case - ownership plus explicit grant."""

import logging

from snipauth.application.dto.permission_dto import CheckPermissionInput
from snipauth.domain.value_objects import (
    ACTION_CATEGORIES,
    ActionCategory,
    SnippetAction,
)

logger = logging.getLogger(__name__)


class CheckPermissionUseCase:
    """Decide whether a user may perform an action on a snippet.

    The owner is passed in by the caller; it is never looked up here. Owners
    hold every capability without a stored grant. Non-owners are decided from
    their single grant row for the resource. Unknown actions are denied for
    everybody, owners included.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def is_allowed(self, request: CheckPermissionInput) -> bool:
        """Return True if user_id may perform action on resource_id."""
        action = SnippetAction.parse(request.action)
        if action is None:
            logger.debug("Unknown action %r denied", request.action)
            return False

        category = ACTION_CATEGORIES[action]
        if category is ActionCategory.UNSCOPED:
            return True
        if request.user_id == request.owner_id:
            return True
        if category is ActionCategory.OWNER_ONLY:
            return False

        async with self._uow_factory() as uow:
            grant = await uow.permissions.find_by_user_and_resource(
                request.user_id, request.resource_id
            )
        if not grant:
            return False
        if category is ActionCategory.REQUIRES_READ:
            return grant.can_read
        return grant.can_edit

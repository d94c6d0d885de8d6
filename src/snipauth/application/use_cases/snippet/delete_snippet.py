"""Delete snippet use case."""

import logging

from snipauth.application.dto.permission_dto import CheckPermissionInput
from snipauth.application.ports import PermissionChecker
from snipauth.domain.exceptions import AuthorizationError, NotFoundError
from snipauth.domain.value_objects import SnippetAction

logger = logging.getLogger(__name__)


class DeleteSnippetUseCase:
    """Delete a snippet together with every grant on it."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, requester_id: str, snippet_id: str) -> None:
        """Remove the snippet if the requester may delete it.

        Raises NotFoundError for an unknown snippet and AuthorizationError when
        the decision for the delete action is negative.
        """
        async with self._uow_factory() as uow:
            snippet = await uow.snippets.get_by_id(snippet_id)
        if not snippet:
            raise NotFoundError("Snippet not found")

        allowed = await self._permission_checker.is_allowed(
            CheckPermissionInput(
                user_id=requester_id,
                resource_id=snippet.id,
                owner_id=snippet.owner_id,
                action=SnippetAction.DELETE.value,
            )
        )
        if not allowed:
            logger.warning("Rejected delete of snippet %s by %s", snippet_id, requester_id)
            raise AuthorizationError("Only the owner can delete a snippet")

        async with self._uow_factory() as uow:
            await uow.permissions.delete_all_by_resource(snippet.id)
            await uow.snippets.delete(snippet.id)

        logger.info("Deleted snippet %s and its grants (by %s)", snippet_id, requester_id)

"""Check permission with ownership resolved from the snippet store."""

from snipauth.application.dto.permission_dto import CheckPermissionInput
from snipauth.application.ports import PermissionChecker


class CheckSnippetPermissionUseCase:
    """Load the snippet's owner, then apply the regular decision.

    A snippet that does not exist is denied like any other missing grant.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def is_allowed(self, user_id: str, snippet_id: str, action: str) -> bool:
        async with self._uow_factory() as uow:
            snippet = await uow.snippets.get_by_id(snippet_id)
        if not snippet:
            return False

        return await self._permission_checker.is_allowed(
            CheckPermissionInput(
                user_id=user_id,
                resource_id=snippet.id,
                owner_id=snippet.owner_id,
                action=action,
            )
        )

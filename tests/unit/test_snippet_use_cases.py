"""Unit tests for snippet register and delete use cases."""

import pytest

from snipauth.application.use_cases.snippet.delete_snippet import DeleteSnippetUseCase
from snipauth.application.use_cases.snippet.register_snippet import RegisterSnippetUseCase
from snipauth.domain.entities import Permission, Snippet
from snipauth.domain.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class TestRegisterSnippet:
    @pytest.mark.asyncio
    async def test_register_records_owner(self, uow_factory, snippet_repo) -> None:
        snippet = await RegisterSnippetUseCase(uow_factory).execute("owner1", "s1")

        assert snippet == Snippet(id="s1", owner_id="owner1")
        assert await snippet_repo.get_by_id("s1") == snippet

    @pytest.mark.asyncio
    async def test_register_taken_id_conflicts(self, uow_factory, snippet_repo) -> None:
        use_case = RegisterSnippetUseCase(uow_factory)
        await use_case.execute("owner1", "s1")

        with pytest.raises(ConflictError):
            await use_case.execute("intruder", "s1")
        assert (await snippet_repo.get_by_id("s1")).owner_id == "owner1"

    @pytest.mark.asyncio
    async def test_register_empty_id_rejected(self, uow_factory) -> None:
        with pytest.raises(ValidationError):
            await RegisterSnippetUseCase(uow_factory).execute("owner1", "")


class TestDeleteSnippet:
    @pytest.mark.asyncio
    async def test_owner_deletes_snippet_and_its_grants(
        self, uow_factory, snippet_repo, permission_repo, checker
    ) -> None:
        await snippet_repo.create(Snippet(id="s1", owner_id="owner1"))
        await permission_repo.save(Permission(user_id="u1", resource_id="s1", can_read=True))
        await permission_repo.save(Permission(user_id="u2", resource_id="s1", can_edit=True))
        await permission_repo.save(Permission(user_id="u1", resource_id="s2", can_read=True))

        await DeleteSnippetUseCase(uow_factory, checker).execute("owner1", "s1")

        assert await snippet_repo.get_by_id("s1") is None
        assert await permission_repo.find_all_by_resource("s1") == []
        assert len(await permission_repo.find_all_by_resource("s2")) == 1

    @pytest.mark.asyncio
    async def test_grantee_with_edit_cannot_delete(
        self, uow_factory, snippet_repo, permission_repo, checker
    ) -> None:
        await snippet_repo.create(Snippet(id="s1", owner_id="owner1"))
        await permission_repo.save(
            Permission(user_id="u1", resource_id="s1", can_read=True, can_edit=True)
        )

        with pytest.raises(AuthorizationError):
            await DeleteSnippetUseCase(uow_factory, checker).execute("u1", "s1")
        assert await snippet_repo.get_by_id("s1") is not None
        assert len(await permission_repo.find_all_by_resource("s1")) == 1

    @pytest.mark.asyncio
    async def test_unknown_snippet(self, uow_factory, mock_permission_checker) -> None:
        with pytest.raises(NotFoundError):
            await DeleteSnippetUseCase(uow_factory, mock_permission_checker).execute(
                "owner1", "missing"
            )
        mock_permission_checker.is_allowed.assert_not_called()

    @pytest.mark.asyncio
    async def test_decision_asked_for_delete_action(
        self, uow_factory, snippet_repo, mock_permission_checker
    ) -> None:
        await snippet_repo.create(Snippet(id="s1", owner_id="owner1"))

        await DeleteSnippetUseCase(uow_factory, mock_permission_checker).execute("owner1", "s1")

        request = mock_permission_checker.is_allowed.call_args.args[0]
        assert (request.user_id, request.owner_id, request.action) == (
            "owner1",
            "owner1",
            "delete",
        )

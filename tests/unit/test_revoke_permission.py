"""Unit tests for RevokePermissionUseCase."""

import pytest

from snipauth.domain.entities import Permission
from snipauth.domain.exceptions import NotFoundError


@pytest.mark.asyncio
async def test_revoke_deletes_permission(revoke_use_case, permission_repo) -> None:
    await permission_repo.save(Permission(user_id="user1", resource_id="snip1", can_read=True))

    await revoke_use_case.execute("user1", "snip1", "owner1")

    assert await permission_repo.find_by_user_and_resource("user1", "snip1") is None


@pytest.mark.asyncio
async def test_revoke_missing_raises_not_found(revoke_use_case, permission_repo) -> None:
    other = await permission_repo.save(
        Permission(user_id="user2", resource_id="snip1", can_read=True)
    )

    with pytest.raises(NotFoundError, match="Permission not found"):
        await revoke_use_case.execute("user1", "snip1", "owner1")

    assert await permission_repo.find_all_by_resource("snip1") == [other]


@pytest.mark.asyncio
async def test_revoke_does_not_check_requester(revoke_use_case, permission_repo) -> None:
    """Any requester can revoke at this layer."""
    await permission_repo.save(Permission(user_id="user1", resource_id="snip1", can_edit=True))

    await revoke_use_case.execute("user1", "snip1", "someone-else")

    assert await permission_repo.find_all_by_user("user1") == []


@pytest.mark.asyncio
async def test_revoke_twice_second_raises(revoke_use_case, permission_repo) -> None:
    await permission_repo.save(Permission(user_id="user1", resource_id="snip1", can_read=True))
    await revoke_use_case.execute("user1", "snip1", "owner1")

    with pytest.raises(NotFoundError):
        await revoke_use_case.execute("user1", "snip1", "owner1")

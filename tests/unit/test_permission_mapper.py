"""Unit tests for PermissionMapper and PermissionView."""

from snipauth.application.mappers.permission_mapper import PermissionMapper
from snipauth.domain.entities import Permission


def test_to_view_copies_fields() -> None:
    view = PermissionMapper().to_view(
        Permission(id=7, user_id="u", resource_id="s", can_read=True, can_edit=False)
    )
    assert view.id == 7
    assert view.user_id == "u"
    assert view.resource_id == "s"
    assert view.can_read is True
    assert view.can_edit is False


def test_to_view_keeps_unassigned_id() -> None:
    view = PermissionMapper().to_view(Permission(user_id="u", resource_id="s"))
    assert view.id is None


def test_to_dict() -> None:
    view = PermissionMapper().to_view(
        Permission(id=1, user_id="u", resource_id="s", can_read=False, can_edit=True)
    )
    assert view.to_dict() == {
        "id": 1,
        "user_id": "u",
        "resource_id": "s",
        "can_read": False,
        "can_edit": True,
    }


def test_to_views_preserves_order() -> None:
    perms = [
        Permission(id=2, user_id="a", resource_id="s"),
        Permission(id=1, user_id="b", resource_id="s"),
    ]
    assert [v.id for v in PermissionMapper().to_views(perms)] == [2, 1]

"""Permission entity - explicit grant of a non-owner on a snippet."""

from dataclasses import dataclass


@dataclass
class Permission:
    """Grant for one (user, resource) pair. id is assigned by the store on first save."""

    user_id: str
    resource_id: str
    can_read: bool = False
    can_edit: bool = False
    id: int | None = None

"""Permission DTOs."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class CheckPermissionInput:
    """Input for a single access decision. owner_id is resolved by the caller."""

    user_id: str
    resource_id: str
    owner_id: str
    action: str


@dataclass
class GrantPermissionInput:
    """Input for granting flags on a resource to a non-owner."""

    requester_id: str
    owner_id: str
    grantee_id: str
    resource_id: str
    can_read: bool
    can_edit: bool


@dataclass
class PermissionView:
    """Public shape of a stored grant."""

    id: int | None
    user_id: str
    resource_id: str
    can_read: bool
    can_edit: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

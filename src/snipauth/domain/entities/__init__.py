"""Domain entities."""

from snipauth.domain.entities.permission import Permission
from snipauth.domain.entities.snippet import Snippet

__all__ = [
    "Permission",
    "Snippet",
]

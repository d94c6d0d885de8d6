"""Repository ports."""

from snipauth.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from snipauth.application.ports.repositories.snippet_repository import (
    SnippetRepository,
)

__all__ = [
    "PermissionRepository",
    "SnippetRepository",
]

"""Domain value objects."""

from snipauth.domain.value_objects.permission_level import PermissionLevel
from snipauth.domain.value_objects.snippet_action import (
    ACTION_CATEGORIES,
    ActionCategory,
    SnippetAction,
)

__all__ = [
    "ACTION_CATEGORIES",
    "ActionCategory",
    "PermissionLevel",
    "SnippetAction",
]

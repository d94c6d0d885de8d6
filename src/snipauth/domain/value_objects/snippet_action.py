"""Actions that can be checked against a snippet."""

from enum import StrEnum


class SnippetAction(StrEnum):
    """Closed action vocabulary. Values are the lower-case wire names."""

    CREATE = "create"
    READ = "read"
    EDIT = "edit"
    UPDATE = "update"
    DELETE = "delete"
    SHARE = "share"
    GRANT_PERMISSION = "grant_permission"
    EXECUTE = "execute"
    RUN_TEST = "run_test"
    FORMAT = "format"
    ANALYZE = "analyze"

    @classmethod
    def parse(cls, action: str) -> "SnippetAction | None":
        """Case-insensitive lookup. Whitespace is significant, so " read " is unknown."""
        try:
            return cls(action.lower())
        except ValueError:
            return None


class ActionCategory(StrEnum):
    """How an action is decided for a non-owner."""

    UNSCOPED = "unscoped"
    REQUIRES_READ = "requires_read"
    REQUIRES_EDIT = "requires_edit"
    OWNER_ONLY = "owner_only"


ACTION_CATEGORIES: dict[SnippetAction, ActionCategory] = {
    SnippetAction.CREATE: ActionCategory.UNSCOPED,
    SnippetAction.READ: ActionCategory.REQUIRES_READ,
    SnippetAction.EDIT: ActionCategory.REQUIRES_EDIT,
    SnippetAction.UPDATE: ActionCategory.REQUIRES_EDIT,
    SnippetAction.DELETE: ActionCategory.OWNER_ONLY,
    SnippetAction.SHARE: ActionCategory.OWNER_ONLY,
    SnippetAction.GRANT_PERMISSION: ActionCategory.OWNER_ONLY,
    # running a snippet needs read, not edit
    SnippetAction.EXECUTE: ActionCategory.REQUIRES_READ,
    SnippetAction.RUN_TEST: ActionCategory.REQUIRES_READ,
    SnippetAction.FORMAT: ActionCategory.REQUIRES_READ,
    SnippetAction.ANALYZE: ActionCategory.REQUIRES_READ,
}

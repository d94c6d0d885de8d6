"""Stored permission levels."""

from enum import StrEnum

from snipauth.domain.exceptions import ValidationError


class PermissionLevel(StrEnum):
    """Flag a grant can carry."""

    READ = "read"
    EDIT = "edit"

    @classmethod
    def parse(cls, level: str) -> "PermissionLevel":
        """Case-insensitive lookup, raises ValidationError for anything else."""
        try:
            return cls(level.lower())
        except ValueError:
            raise ValidationError(
                "Invalid permission type. Must be 'read' or 'edit'"
            ) from None

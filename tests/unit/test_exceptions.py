"""Unit tests for domain exceptions."""

import pytest

from snipauth.domain.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    SnipAuthError,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc", [AuthorizationError, ValidationError, NotFoundError, ConflictError]
)
def test_domain_errors_inherit_base(exc) -> None:
    """Every domain error is a SnipAuthError."""
    assert issubclass(exc, SnipAuthError)


def test_raise_not_found_catchable_as_base() -> None:
    """NotFoundError can be caught as SnipAuthError."""
    with pytest.raises(SnipAuthError):
        raise NotFoundError("Permission not found")


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "Only the owner can grant permissions"
    with pytest.raises(AuthorizationError, match=msg):
        raise AuthorizationError(msg)

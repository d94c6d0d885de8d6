"""Domain exceptions."""


class SnipAuthError(Exception):
    """Base exception for snipauth."""

    pass


class AuthorizationError(SnipAuthError):
    """Requester is not allowed to perform a management action."""

    pass


class ValidationError(SnipAuthError):
    """Request is structurally invalid."""

    pass


class NotFoundError(SnipAuthError):
    """Requested grant or resource was not found."""

    pass


class ConflictError(SnipAuthError):
    """Resource already exists."""

    pass

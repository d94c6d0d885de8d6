"""Auth middleware - extracts user from bearer token."""

from dataclasses import dataclass

import falcon.asgi

ANONYMOUS = "anonymous"


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that validates the bearer token and sets req.context.user.

    With a token provider, a missing or rejected token sets user to None.
    Without one (local runs), requests without a header act as the anonymous
    subject and bearer tokens cannot be verified, so they also yield None.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth:
            if self._keycloak is None:
                req.context.user = RequestUser(user_id=ANONYMOUS)
            return
        if not auth.startswith("Bearer ") or self._keycloak is None:
            return

        user = self._keycloak.decode_token(auth[7:])
        if user:
            req.context.user = RequestUser(
                user_id=user.user_id,
                email=user.email,
                username=user.username,
            )

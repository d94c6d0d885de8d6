"""Health check endpoints."""

from collections.abc import Awaitable, Callable

import falcon.asgi


class HealthResource:
    """Liveness and readiness endpoints.

    Readiness asks the storage backend through ``readiness``; without one the
    service is ready as soon as it is alive (in-memory storage).
    """

    def __init__(self, readiness: Callable[[], Awaitable[bool]] | None = None) -> None:
        self._readiness = readiness

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - 503 while the store is unreachable."""
        if self._readiness and not await self._readiness():
            resp.media = {"status": "unavailable"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200

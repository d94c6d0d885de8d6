"""PostgreSQL async connection pool."""

import logging
from collections.abc import Awaitable, Callable

import psycopg
from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must call await pool.open()
    before use (e.g. via PoolLifespanMiddleware in ASGI lifespan).
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


def create_readiness_check(
    pool: AsyncConnectionPool, timeout: float = 2.0
) -> Callable[[], Awaitable[bool]]:
    """Return a readiness check that runs SELECT 1 on a pooled connection."""

    async def check() -> bool:
        try:
            async with pool.connection(timeout=timeout) as conn:
                await conn.execute("SELECT 1")
        except psycopg.Error as e:
            logger.warning("Database not ready: %s", e)
            return False
        return True

    return check

"""Database service owning the asyncpg pool.

Repositories never touch the pool directly. They ask the service for a
connection, or accept one from a caller that is already inside a
transaction (ownership transfer runs every step on one connection).
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

import asyncpg

from ....core.exceptions import ConnectionPoolError, TransactionError
from ..entities.config import DatabaseSettings, get_database_settings

logger = logging.getLogger(__name__)


class DatabaseService:
    """Pooled access to the PostgreSQL store."""

    def __init__(self, settings: Optional[DatabaseSettings] = None):
        self._settings = settings or get_database_settings()
        self._pool: Optional[asyncpg.Pool] = None
        self._lock = asyncio.Lock()
        self._is_closing = False

    @property
    def settings(self) -> DatabaseSettings:
        return self._settings

    async def _create_pool(self) -> asyncpg.Pool:
        try:
            pool = await asyncpg.create_pool(**self._settings.to_asyncpg_kwargs())
        except (asyncpg.PostgresError, OSError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to create pool for {self._settings.safe_dsn}: {e}")
            raise ConnectionPoolError(f"Failed to create connection pool: {e}") from e

        logger.info(
            f"Created connection pool for {self._settings.safe_dsn}: "
            f"min={self._settings.pool_min_size}, max={self._settings.pool_max_size}"
        )
        return pool

    async def _ensure_pool(self) -> asyncpg.Pool:
        if self._is_closing:
            raise ConnectionPoolError("Pool is closing")
        if self._pool is None:
            async with self._lock:
                if self._pool is None:  # Double-check
                    self._pool = await self._create_pool()
        return self._pool

    async def initialize(self) -> None:
        """Create the pool eagerly, typically from a startup hook."""
        await self._ensure_pool()

    async def close(self) -> None:
        """Close the connection pool."""
        self._is_closing = True
        async with self._lock:
            if self._pool is not None:
                await self._pool.close()
                self._pool = None
                logger.info(f"Closed connection pool for {self._settings.safe_dsn}")

    @asynccontextmanager
    async def get_connection(self):
        """Get a pooled connection within a context manager."""
        pool = await self._ensure_pool()
        try:
            conn = await pool.acquire(timeout=self._settings.pool_timeout_seconds)
        except (asyncpg.PostgresError, OSError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to acquire connection: {e}")
            raise ConnectionPoolError(f"Failed to acquire connection: {e}") from e
        try:
            yield conn
        finally:
            await pool.release(conn)

    @asynccontextmanager
    async def transaction(self):
        """Start a database transaction, yielding its connection."""
        async with self.get_connection() as conn:
            try:
                async with conn.transaction():
                    yield conn
            except asyncpg.PostgresError as e:
                logger.error(f"Transaction rolled back: {e}")
                raise TransactionError(f"Transaction failed: {e}") from e

    @asynccontextmanager
    async def use_connection(self, conn=None):
        """Yield ``conn`` when the caller already holds one, else acquire."""
        if conn is not None:
            yield conn
            return
        async with self.get_connection() as acquired:
            yield acquired

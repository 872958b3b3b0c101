"""
PostgreSQL Client

Async PostgreSQL client built on an asyncpg connection pool.
One client per process; the pool is safe for concurrent use by in-flight requests.

Usage:
    from core.postgres_client import AsyncPostgresClient

    db = AsyncPostgresClient(dsn, service_name="album_service")

    # Scoped lifecycle: pool opened on entry, closed on exit
    async with db:
        row = await db.query_row("SELECT album_id FROM albums WHERE album_id = $1", [album_id])
"""

import logging
from typing import Any, Dict, List, Optional

import asyncpg

logger = logging.getLogger(__name__)


class PostgresNotConnectedError(RuntimeError):
    """Raised when a statement is issued before connect() or after close()"""
    pass


class AsyncPostgresClient:
    """
    PostgreSQL client wrapper around an asyncpg pool.

    Provides:
    - Scoped pool lifecycle (connect/close, async context manager)
    - Parameterized query helpers returning plain dicts
    - Per-statement timeout
    - Health probe
    """

    def __init__(
        self,
        dsn: str,
        service_name: str = "default",
        min_size: int = 1,
        max_size: int = 10,
        statement_timeout: Optional[float] = 5.0,
    ):
        """
        Initialize PostgreSQL client.

        Args:
            dsn: PostgreSQL connection string
            service_name: Name of the service using this client (logging only)
            min_size: Minimum pool size
            max_size: Maximum pool size
            statement_timeout: Seconds allowed per statement (None disables)
        """
        self.dsn = dsn
        self.service_name = service_name
        self.min_size = min_size
        self.max_size = max(max_size, min_size)
        self.statement_timeout = statement_timeout
        self._pool: Optional[asyncpg.Pool] = None

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self):
        """Create the connection pool (opens min_size connections eagerly)"""
        if self._pool is not None:
            return
        self._pool = await asyncpg.create_pool(
            dsn=self.dsn,
            min_size=self.min_size,
            max_size=self.max_size,
        )
        logger.info(f"PostgreSQL pool opened for {self.service_name} (size {self.min_size}-{self.max_size})")

    async def close(self):
        """Close the connection pool"""
        if self._pool is None:
            return
        pool, self._pool = self._pool, None
        await pool.close()
        logger.info(f"PostgreSQL pool closed for {self.service_name}")

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _require_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise PostgresNotConnectedError(f"PostgreSQL client for {self.service_name} is not connected")
        return self._pool

    async def query(self, sql: str, params: Optional[List[Any]] = None) -> List[Dict[str, Any]]:
        """Execute query and return all rows"""
        pool = self._require_pool()
        rows = await pool.fetch(sql, *(params or []), timeout=self.statement_timeout)
        return [dict(row) for row in rows]

    async def query_row(self, sql: str, params: Optional[List[Any]] = None) -> Optional[Dict[str, Any]]:
        """Execute query and return the first row, or None when no rows match"""
        pool = self._require_pool()
        row = await pool.fetchrow(sql, *(params or []), timeout=self.statement_timeout)
        return dict(row) if row is not None else None

    async def execute(self, sql: str, params: Optional[List[Any]] = None) -> str:
        """Execute a statement and return its status tag (e.g. 'INSERT 0 1')"""
        pool = self._require_pool()
        return await pool.execute(sql, *(params or []), timeout=self.statement_timeout)

    async def health_check(self) -> bool:
        """Check database health"""
        try:
            pool = self._require_pool()
            return await pool.fetchval("SELECT 1", timeout=self.statement_timeout) == 1
        except Exception as e:
            logger.warning(f"PostgreSQL health check failed for {self.service_name}: {e}")
            return False

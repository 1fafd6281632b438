import logging
from pathlib import Path
from typing import Optional

import asyncpg

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


class DatabasePool:
    """Manages the asyncpg connection pool lifecycle."""

    def __init__(self):
        self._pool: Optional[asyncpg.Pool] = None

    async def initialize(
        self,
        dsn: str = None,
        *,
        host: str = "localhost",
        port: int = 5432,
        database: str = "merry_mulligan",
        user: str = "postgres",
        password: str = "",
        min_size: int = 2,
        max_size: int = 10,
    ) -> None:
        """Create the connection pool. Call once at app startup."""
        if self._pool is not None:
            return
        self._pool = await asyncpg.create_pool(
            dsn=dsn,
            host=None if dsn else host,
            port=None if dsn else port,
            database=None if dsn else database,
            user=None if dsn else user,
            password=None if dsn else password,
            min_size=min_size,
            max_size=max_size,
        )
        logger.info("Database pool ready (min=%d, max=%d)", min_size, max_size)

    async def close(self) -> None:
        """Close all connections. Call at app shutdown."""
        if self._pool:
            await self._pool.close()
            self._pool = None
            logger.info("Database pool closed")

    @property
    def pool(self) -> asyncpg.Pool:
        """Get the pool, raising if not initialized."""
        if self._pool is None:
            raise RuntimeError(
                "Database pool not initialized. Call await db.initialize() first."
            )
        return self._pool

    async def apply_schema(self, schema_path: Path = SCHEMA_PATH) -> None:
        """Create the game schema and tables if they do not exist."""
        sql_text = schema_path.read_text(encoding="utf-8")
        async with self.pool.acquire() as conn:
            async with conn.transaction():
                await conn.execute(sql_text)
        logger.info("Applied schema from %s", schema_path.name)

    async def health_check(self) -> bool:
        """Test connectivity with SELECT 1."""
        try:
            async with self.pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except (OSError, RuntimeError, asyncpg.PostgresError):
            logger.warning("Database health check failed", exc_info=True)
            return False


# Module-level singleton for convenience
db = DatabasePool()

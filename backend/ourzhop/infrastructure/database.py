"""Database Connection — async engine for the readiness probe.

Invariants:
    - Creating the manager does not connect; the first connect() or health_check does
    - Pool uses pool_pre_ping so stale connections are replaced, not reported unhealthy
    - SQLAlchemy failures leave connect() as DatabaseError (core/errors.py)
    - health_check never raises: DatabaseError becomes False

Design Decisions:
    - Module-level db_manager set by init_db from the FastAPI lifespan
      (ADR: no global import side effects)
    - No ORM session factory: the service owns no tables, it only probes connectivity
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine

from ourzhop.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the async engine and answers connectivity checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )

    @asynccontextmanager
    async def connect(self) -> AsyncGenerator[AsyncConnection, None]:
        """Pooled connection; SQLAlchemy errors surface as DatabaseError."""
        try:
            async with self.engine.connect() as conn:
                yield conn
        except SQLAlchemyError as e:
            logger.error(f"DB error: {e}")
            raise DatabaseError(type(e).__name__, "execute") from e

    async def health_check(self) -> bool:
        try:
            async with self.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except DatabaseError as e:
            logger.warning(f"DB health check failed: {e.message}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None

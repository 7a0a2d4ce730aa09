"""Database Session Manager: async connection pool with rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Pool bounded: pool_size open + max_overflow, connections recycled after pool_recycle
    - All SQLAlchemy exceptions mapped to StoreError (core/errors.py), driver text kept

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - store_errors() shared by the session manager and the repository
"""

import asyncio
import logging
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncGenerator, Iterator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from museum_api.core.errors import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy exceptions raised inside the block to StoreError."""
    try:
        yield
    except IntegrityError as e:
        raise StoreError(f"integrity constraint violated ({e.orig})", operation) from e
    except OperationalError as e:
        raise StoreError(f"connection or operational error ({e.orig})", operation) from e
    except DBAPIError as e:
        raise StoreError(f"driver error ({e.orig})", operation) from e
    except SQLAlchemyError as e:
        raise StoreError(str(e), operation) from e


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_recycle: int = 180,
    ):
        engine_kwargs = {"pool_pre_ping": True, "pool_recycle": pool_recycle}
        # SQLite (tests, local runs) uses a static pool without sizing knobs
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(pool_size=pool_size, max_overflow=max_overflow)
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"DB error: {e}")
            with store_errors("session"):
                raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def verify(self, timeout: float) -> None:
        """Startup connectivity check. Raises StoreError on failure or timeout."""
        try:
            async with asyncio.timeout(timeout):
                async with self.session() as db:
                    await db.execute(text("SELECT 1"))
        except TimeoutError as e:
            raise StoreError(f"no response within {timeout}s", "connect") from e
        logger.info("Database connection verified")

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session

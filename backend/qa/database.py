"""
Q&A Questions — Database Session Management
============================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       transactional session scope used by every service call.
How:   Creates an async engine with connection pooling and provides
       `session_scope()`, which commits on success and rolls back on error.
Who:   Used by callers of the services layer and by Alembic (Base.metadata).
When:  Engine is created at module import; sessions are created per unit of work.

Connection Pooling Strategy:
    pool_size=20:      Persistent connections for normal load
    max_overflow=10:   Temporary connections for traffic spikes (total max = 30)
    pool_pre_ping:     Validates connections before use
    pool_recycle=3600: Recycles connections every hour

    SQLite URLs (tests) get no pool options; aiosqlite uses its own pool class.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from qa.config import settings

logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after commit without
# triggering a lazy reload outside the session context
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class to:
    1. Register with SQLAlchemy's metadata (used by Alembic for migrations)
    2. Share a single metadata object for consistent schema management
    """
    pass


# ── Session Scope ─────────────────────────────────────────────────────────
@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker = async_session_factory,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Provides a transactional session for one unit of work.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the caller (services only flush)
        3. On success: commits the transaction
        4. On error: rolls back and re-raises unmodified
        5. Always: closes the session (returns connection to pool)

    Example usage:
        async with session_scope() as db:
            question = await question_service.create(db, form, actor_id=7)

    Raises:
        Storage errors (SQLAlchemyError) and application errors propagate
        unchanged after the rollback.
    """
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            logger.error("Storage error, rolling back: %s", str(e))
            await session.rollback()
            raise
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_all(bind: AsyncEngine = engine) -> None:
    """
    Creates every table registered on Base.metadata.

    When:  Test fixtures and local SQLite setups. Deployed databases are
           managed by the Alembic migrations instead.
    """
    import qa.models  # noqa: F401  (registers all tables)

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Gracefully closes all connections in the pool."""
    await engine.dispose()

"""
Q&A Questions — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── engine:            In-memory SQLite (aiosqlite) with every table created
    ├── session_factory:   async_sessionmaker bound to that engine
    ├── db:                An open AsyncSession for service tests
    ├── users:             Two persisted users (alice, bob)
    ├── mock_db_session:   AsyncMock session for pure unit tests
    └── question_form:     A valid QuestionCreate
"""

import os

# Override settings for testing BEFORE any qa imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from qa.database import create_all
from qa.models import User
from qa.schemas.question import QuestionCreate


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def engine():
    """
    A private in-memory database per test.

    StaticPool keeps the single connection alive so every session sees
    the same in-memory schema.
    """
    test_engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await create_all(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def users(db):
    """Persisted users: (alice, bob)."""
    alice = User(username="alice")
    bob = User(username="bob")
    db.add_all([alice, bob])
    await db.flush()
    return alice, bob


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = question
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def question_form():
    return QuestionCreate(title="Hello World", content="body", tags="php, yii")

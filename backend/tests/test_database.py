"""
Q&A Questions — Session Scope Tests
====================================

What:  session_scope() commits a successful unit of work and rolls back a
       failed one without altering the raised error.
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from qa.database import session_scope
from qa.exceptions import ValidationError
from qa.models import Question, User
from qa.schemas.question import QuestionCreate
from qa.services.question_service import question_service


async def user_count(session_factory) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(User))
        return result.scalar_one()


class TestSessionScope:

    @pytest.mark.asyncio
    async def test_commits_on_success(self, session_factory):
        async with session_scope(session_factory) as db:
            db.add(User(username="carol"))

        assert await user_count(session_factory) == 1

    @pytest.mark.asyncio
    async def test_rolls_back_on_application_error(self, session_factory):
        with pytest.raises(RuntimeError, match="boom"):
            async with session_scope(session_factory) as db:
                db.add(User(username="carol"))
                await db.flush()
                raise RuntimeError("boom")

        assert await user_count(session_factory) == 0

    @pytest.mark.asyncio
    async def test_storage_error_propagates_unmodified(self, session_factory):
        async with session_scope(session_factory) as db:
            db.add(User(username="carol"))

        with pytest.raises(IntegrityError):
            async with session_scope(session_factory) as db:
                db.add(User(username="dave"))
                await db.flush()
                db.add(User(username="carol"))

        assert await user_count(session_factory) == 1

    @pytest.mark.asyncio
    async def test_failed_create_leaves_no_question(self, session_factory):
        async with session_scope(session_factory) as db:
            db.add(User(id=1, username="alice"))

        with pytest.raises(ValidationError):
            async with session_scope(session_factory) as db:
                await question_service.create(db, QuestionCreate(title="t", content="c", tags="a"), 1)
                await question_service.create(db, QuestionCreate(title="", content="c", tags="b"), 1)

        async with session_scope(session_factory) as db:
            result = await db.execute(select(func.count()).select_from(Question))
            assert result.scalar_one() == 0

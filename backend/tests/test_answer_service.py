"""
Q&A Questions — Answer Service Tests
=====================================

What:  Tests for posting and removing answers and the parent question's
       answer counter.
"""

import pytest

from qa.exceptions import NotFoundError, ValidationError
from qa.schemas.question import AnswerCreate
from qa.services.answer_service import AnswerService
from qa.services.question_service import question_service


class TestAnswerService:

    def setup_method(self):
        self.service = AnswerService()

    @pytest.mark.asyncio
    async def test_create_increments_counter(self, db, users, question_form):
        alice, bob = users
        question = await question_service.create(db, question_form, alice.id)

        answer = await self.service.create(db, question.id, AnswerCreate(content="Use Yii 2."), bob.id)

        assert answer.id is not None
        assert answer.user_id == bob.id
        assert (await question_service.get_counters(db, question.id))["answers"] == 1

    @pytest.mark.asyncio
    async def test_delete_decrements_counter(self, db, users, question_form):
        alice, bob = users
        question = await question_service.create(db, question_form, alice.id)
        first = await self.service.create(db, question.id, AnswerCreate(content="one"), bob.id)
        await self.service.create(db, question.id, AnswerCreate(content="two"), bob.id)

        await self.service.delete(db, first.id)

        assert (await question_service.get_counters(db, question.id))["answers"] == 1
        remaining = await self.service.list_for(db, question.id)
        assert [a.content for a in remaining] == ["two"]

    @pytest.mark.asyncio
    async def test_blank_content_is_rejected(self, db, users, question_form):
        alice, bob = users
        question = await question_service.create(db, question_form, alice.id)

        with pytest.raises(ValidationError) as exc_info:
            await self.service.create(db, question.id, AnswerCreate(content="   "), bob.id)

        assert exc_info.value.field == "content"
        assert (await question_service.get_counters(db, question.id))["answers"] == 0

    @pytest.mark.asyncio
    async def test_answer_to_missing_question(self, db, users):
        _, bob = users
        with pytest.raises(NotFoundError):
            await self.service.create(db, 999, AnswerCreate(content="hello?"), bob.id)

    @pytest.mark.asyncio
    async def test_delete_missing_answer(self, db):
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.delete(db, 42)
        assert exc_info.value.resource == "answer"

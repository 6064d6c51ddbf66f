"""
Q&A Questions — Answer Service
===============================

What:  Creates and removes answers and keeps the parent question's
       `answers` counter in step.
How:   The counter is moved with a single UPDATE (Question.update_counters),
       never by reading and re-assigning the field.
Who:   Called by the embedding application for answer CRUD and by
       QuestionService.delete for the cascade.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from qa.exceptions import NotFoundError, ValidationError
from qa.models.answer import Answer
from qa.models.question import Question, utcnow
from qa.schemas.question import AnswerCreate

logger = logging.getLogger(__name__)


class AnswerService:

    async def create(
        self,
        db: AsyncSession,
        question_id: int,
        data: AnswerCreate,
        actor_id: int,
    ) -> Answer:
        """
        Posts an answer and increments the question's answer counter.

        Raises:
            ValidationError: Blank content
            NotFoundError: The question does not exist
        """
        if not data.content.strip():
            raise ValidationError(message="Content cannot be blank.", field="content")

        exists = await db.execute(select(Question.id).where(Question.id == question_id))
        if exists.scalar_one_or_none() is None:
            raise NotFoundError(resource="question", resource_id=question_id)

        now = utcnow()
        answer = Answer(
            question_id=question_id,
            user_id=actor_id,
            content=data.content,
            votes=0,
            created_at=now,
            updated_at=now,
        )
        db.add(answer)
        await db.flush()
        await db.execute(Question.update_counters(question_id, answers=1))
        logger.info("Answer %s posted to question %s by user %s", answer.id, question_id, actor_id)
        return answer

    async def delete(self, db: AsyncSession, answer_id: int) -> None:
        """
        Removes one answer and decrements the question's answer counter.

        Raises:
            NotFoundError: The answer does not exist
        """
        result = await db.execute(select(Answer).where(Answer.id == answer_id))
        answer = result.scalar_one_or_none()
        if answer is None:
            raise NotFoundError(resource="answer", resource_id=answer_id)

        question_id = answer.question_id
        await db.delete(answer)
        await db.flush()
        await db.execute(Question.update_counters(question_id, answers=-1))
        logger.info("Answer %s removed from question %s", answer_id, question_id)

    async def remove_all_for(self, db: AsyncSession, question_id: int) -> int:
        """Deletes every answer of a question; the question row is already gone."""
        result = await db.execute(
            delete(Answer)
            .where(Answer.question_id == question_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def list_for(self, db: AsyncSession, question_id: int) -> List[Answer]:
        result = await db.execute(
            select(Answer)
            .where(Answer.question_id == question_id)
            .order_by(Answer.created_at, Answer.id)
        )
        return list(result.scalars().all())


answer_service = AnswerService()

"""
Q&A Questions — Question Service (lifecycle orchestrator)
==========================================================

What:  Drives the Question entity through create, read, update and delete,
       and exposes the favorite, counter and relation queries around it.
How:   Composes the Question model's lifecycle steps with the tag, favorite,
       vote, answer and identity services. Every method receives the
       session and, where attribution or ownership matters, the acting
       user's id.
Who:   Called by the embedding application's controllers and jobs.

Lifecycle pipeline:
    create:  validate → prepare_insert → flush → after-save(old="")
    get:     select → mark_loaded (captures stored tags)
    update:  get → author check → apply fields → validate → touch → flush → after-save
    delete:  get → author check → delete row → after-delete:
                 tag frequencies → favorites → votes → answers

Transactions:
    The service only flushes. The caller's session_scope() commits once at
    the end, so the delete cascade and the favorite toggle are applied or
    rolled back as a whole.
"""

import logging
from typing import List, Optional

from sqlalchemy import literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from qa.config import settings
from qa.exceptions import NotFoundError, PermissionDeniedError, ValidationError
from qa.models.answer import Answer
from qa.models.favorite import Favorite
from qa.models.question import Question
from qa.schemas.question import QuestionCreate, QuestionResponse, QuestionUpdate
from qa.services.answer_service import answer_service
from qa.services.favorite_service import favorite_service
from qa.services.identity_service import identity_service
from qa.services.tag_service import tag_service
from qa.services.vote_service import vote_service

logger = logging.getLogger(__name__)


class QuestionService:
    """
    Business logic layer for questions.

    Error Handling Strategy:
        ValidationError, NotFoundError and PermissionDeniedError are raised
        before anything is written. Storage errors from SQLAlchemy propagate
        unmodified; session_scope() rolls the unit of work back.
    """

    # ── Create ────────────────────────────────────────────────────────────

    async def create(self, db: AsyncSession, data: QuestionCreate, actor_id: int) -> Question:
        """
        Asks a new question on behalf of `actor_id`.

        alias, status, user_id and both timestamps are always set here;
        anything the caller put in those fields is discarded.

        Raises:
            ValidationError: title, content or tags blank (no write happens)
        """
        question = Question(title=data.title, content=data.content, tags=data.tags)
        question.validate()
        question.prepare_insert(actor_id)

        db.add(question)
        await db.flush()
        await self._after_save(db, question, is_insert=True)

        logger.info("Question %s created by user %s (alias=%s)", question.id, actor_id, question.alias)
        return question

    # ── Read ──────────────────────────────────────────────────────────────

    async def get(self, db: AsyncSession, question_id: int) -> Question:
        """
        Loads a question and captures its stored tags for later diffs.

        Raises:
            NotFoundError: No question with that id
        """
        result = await db.execute(select(Question).where(Question.id == question_id))
        question = result.scalar_one_or_none()
        if question is None:
            raise NotFoundError(resource="question", resource_id=question_id)
        question.mark_loaded()
        return question

    async def get_by_alias(self, db: AsyncSession, alias: str) -> Question:
        result = await db.execute(
            select(Question).where(Question.alias == alias).order_by(Question.id).limit(1)
        )
        question = result.scalar_one_or_none()
        if question is None:
            raise NotFoundError(resource="question", resource_id=alias)
        question.mark_loaded()
        return question

    async def list_questions(
        self,
        db: AsyncSession,
        limit: int = 20,
        offset: int = 0,
        tag: Optional[str] = None,
    ) -> List[Question]:
        """
        Newest questions first, optionally only those carrying `tag`.

        The tag filter wraps the stored string in delimiters so "php" does
        not match "php5":  ",php,yii," LIKE "%,php,%"
        Wildcards in `tag` are escaped and match literally.
        """
        query = select(Question)
        if tag:
            delimiter = settings.tag_delimiter
            wrapped = literal(delimiter) + Question.tags + literal(delimiter)
            query = query.where(
                wrapped.contains(f"{delimiter}{tag.strip()}{delimiter}", autoescape=True)
            )
        query = query.order_by(Question.created_at.desc(), Question.id.desc())
        query = query.offset(offset).limit(limit)

        result = await db.execute(query)
        questions = list(result.scalars().all())
        for question in questions:
            question.mark_loaded()
        return questions

    # ── Update ────────────────────────────────────────────────────────────

    async def update(
        self,
        db: AsyncSession,
        question_id: int,
        data: QuestionUpdate,
        actor_id: int,
    ) -> Question:
        """
        Edits title, content and/or tags. alias and status never change.

        Raises:
            NotFoundError: No question with that id
            PermissionDeniedError: actor_id is not the author
            ValidationError: a required field became blank
        """
        question = await self.get(db, question_id)
        self._require_author(question, actor_id)

        changes = data.model_dump(exclude_none=True)
        snapshot = {field: getattr(question, field) for field in changes}
        for field, value in changes.items():
            setattr(question, field, value)

        try:
            question.validate()
        except ValidationError:
            # Leave the identity-mapped instance as it was loaded
            for field, value in snapshot.items():
                setattr(question, field, value)
            raise

        question.touch()
        await db.flush()
        await self._after_save(db, question, is_insert=False)

        logger.info("Question %s updated by user %s (fields=%s)", question.id, actor_id, sorted(changes))
        return question

    # ── Delete ────────────────────────────────────────────────────────────

    async def delete(self, db: AsyncSession, question_id: int, actor_id: int) -> None:
        """
        Deletes a question and everything hanging off it.

        Raises:
            NotFoundError: No question with that id
            PermissionDeniedError: actor_id is not the author
        """
        question = await self.get(db, question_id)
        self._require_author(question, actor_id)

        await db.delete(question)
        await db.flush()
        await self._after_delete(db, question)

        logger.info("Question %s deleted by user %s", question_id, actor_id)

    # ── Lifecycle steps ───────────────────────────────────────────────────

    async def _after_save(self, db: AsyncSession, question: Question, is_insert: bool) -> None:
        old_tags = "" if is_insert else question.old_tags
        await tag_service.update_frequency(db, old_tags, question.tags)
        # The saved tags are the baseline for the next save
        question.mark_loaded()

    async def _after_delete(self, db: AsyncSession, question: Question) -> None:
        await tag_service.update_frequency(db, question.tags, "")
        favorites = await favorite_service.remove_all_for(db, question.id)
        votes = await vote_service.remove_all_for(db, question)
        answers = await answer_service.remove_all_for(db, question.id)
        logger.info(
            "Cascade for question %s: %d favorites, %d votes, %d answers removed",
            question.id, favorites, votes, answers,
        )

    @staticmethod
    def _require_author(question: Question, actor_id: int) -> None:
        if not question.is_author(actor_id):
            raise PermissionDeniedError(actor_id=actor_id, resource="question", resource_id=question.id)

    # ── Favorites ─────────────────────────────────────────────────────────

    async def is_favorite(self, db: AsyncSession, question: Question, user_id: int) -> bool:
        return await favorite_service.exists(db, user_id, question.id)

    async def toggle_favorite(self, db: AsyncSession, question_id: int, user_id: int) -> bool:
        """
        Flips the user's bookmark on a question.

        Returns:
            True when the question is now a favorite, False when it was removed.
        """
        if await favorite_service.exists(db, user_id, question_id):
            await favorite_service.remove(db, user_id, question_id)
            return False
        await favorite_service.add(db, user_id, question_id)
        return True

    # ── Counters ──────────────────────────────────────────────────────────

    async def increment_answers(self, db: AsyncSession, question_id: int) -> None:
        await db.execute(Question.update_counters(question_id, answers=1))

    async def decrement_answers(self, db: AsyncSession, question_id: int) -> None:
        await db.execute(Question.update_counters(question_id, answers=-1))

    async def increment_views(self, db: AsyncSession, question_id: int) -> None:
        await db.execute(Question.update_counters(question_id, views=1))

    async def get_counters(self, db: AsyncSession, question_id: int) -> dict:
        """Fresh counter values straight from storage."""
        result = await db.execute(
            select(Question.answers, Question.views, Question.votes).where(Question.id == question_id)
        )
        row = result.one_or_none()
        if row is None:
            raise NotFoundError(resource="question", resource_id=question_id)
        return {"answers": row.answers, "views": row.views, "votes": row.votes}

    # ── Relations ─────────────────────────────────────────────────────────

    async def list_answers(self, db: AsyncSession, question_id: int) -> List[Answer]:
        return await answer_service.list_for(db, question_id)

    async def list_favorites(self, db: AsyncSession, question_id: int) -> List[Favorite]:
        return await favorite_service.list_for(db, question_id)

    async def get_user_name(self, db: AsyncSession, question: Question) -> str:
        """Author display name; falls back to the user id when the account is gone."""
        name = await identity_service.get_user_name(db, question.user_id)
        return name if name is not None else str(question.user_id)

    # ── Read model ────────────────────────────────────────────────────────

    async def to_response(self, db: AsyncSession, question: Question) -> QuestionResponse:
        return QuestionResponse(
            id=question.id,
            user_id=question.user_id,
            user_name=await self.get_user_name(db, question),
            title=question.title,
            alias=question.alias,
            content=question.content,
            tags=question.tags,
            tags_list=question.get_tags_list(),
            answers=question.answers,
            views=question.views,
            votes=question.votes,
            status=question.status,
            is_draft=question.is_draft(),
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


# ── Singleton Instance ────────────────────────────────────────────────────
question_service = QuestionService()

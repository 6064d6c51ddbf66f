"""
Q&A Questions — Question SQLAlchemy Model
==========================================

What:  ORM model representing the `qa_question` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for
       migrations. Lifecycle steps the host framework used to run through
       event hooks are plain methods here, called by QuestionService:

           prepare_insert()  before the first flush (alias, status, author, timestamps)
           validate()        before every flush (required fields, tag normalization)
           touch()           before an update flush (updated_at)
           mark_loaded()     right after loading (captures the stored tags)

Column Notes:
    - alias: slug of the title, written once at insert and never recomputed
    - tags: delimited string, normalized by validate()
    - answers / views / votes: counters; changed only through update_counters()
    - status: QuestionStatus; always PUBLISHED at insert
"""

import enum
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from slugify import slugify
from sqlalchemy import DateTime, ForeignKey, Index, Integer, SmallInteger, String, Text, Update, text, update
from sqlalchemy.orm import Mapped, mapped_column

from qa.config import settings
from qa.database import Base
from qa.exceptions import ValidationError
from qa.models.tag import Tag


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuestionStatus(enum.IntEnum):
    DRAFT = 0
    PUBLISHED = 1


class Question(Base):
    """
    A question posted to the Q&A board.

    Lifecycle:
        1. Created: prepare_insert() stamps alias, status, author and timestamps
        2. Updated: validate() re-normalizes tags, touch() refreshes updated_at
        3. Deleted: QuestionService cleans up tags, favorites, votes and answers

    Relations (answers, favorites, author) are not mapped with relationship();
    they are read through explicit service queries keyed by this id.
    """

    __tablename__ = "qa_question"

    REQUIRED_FIELDS = ("title", "content", "tags")
    TAGS_MAX_LENGTH = 255

    # Tags as stored when the record was loaded; "" for new records
    _old_tags = ""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("qa_user.id"),
        nullable=False,
        index=True,
        comment="Author; stamped from the acting user at insert",
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    alias: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="URL slug derived from the title at insert",
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    tags: Mapped[str] = mapped_column(
        String(TAGS_MAX_LENGTH),
        nullable=False,
        default="",
        comment="Delimited, deduplicated tag names",
    )

    # ── Counters ──────────────────────────────────────────────────────────
    answers: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default=text("0"))
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default=text("0"))
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default=text("0"))

    status: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        default=QuestionStatus.PUBLISHED,
        server_default=text("1"),
        comment="0 = draft, 1 = published",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_qa_question_created_at", created_at.desc()),
        Index("idx_qa_question_alias", "alias"),
    )

    # ── Lifecycle steps ───────────────────────────────────────────────────

    @staticmethod
    def build_alias(title: str) -> str:
        return slugify(title or "", max_length=settings.alias_max_length)

    def prepare_insert(self, actor_id: int, now: Optional[datetime] = None) -> None:
        """Stamps the fields owned by the insert step; caller values are overwritten."""
        now = now or utcnow()
        self.alias = self.build_alias(self.title)
        self.status = QuestionStatus.PUBLISHED
        self.user_id = actor_id
        self.created_at = now
        self.updated_at = now
        for counter in ("answers", "views", "votes"):
            if getattr(self, counter) is None:
                setattr(self, counter, 0)

    def touch(self, now: Optional[datetime] = None) -> None:
        self.updated_at = now or utcnow()

    def validate(self) -> None:
        """
        Checks required fields and normalizes tags.

        Raises:
            ValidationError: with one message per blank or over-long field
        """
        errors: Dict[str, str] = {}
        for field in self.REQUIRED_FIELDS:
            value = getattr(self, field)
            blank = value is None or not str(value).strip()
            # "," alone is not blank text but holds no tag
            if field == "tags" and not blank:
                blank = not Tag.string_to_list(value)
            if blank:
                errors[field] = f"{field.capitalize()} cannot be blank."

        normalized = Tag.normalize(self.tags)
        if "tags" not in errors:
            if any(len(name) > Tag.NAME_MAX_LENGTH for name in Tag.string_to_list(normalized)):
                errors["tags"] = f"Each tag must be at most {Tag.NAME_MAX_LENGTH} characters."
            elif len(normalized) > self.TAGS_MAX_LENGTH:
                errors["tags"] = f"Tags must be at most {self.TAGS_MAX_LENGTH} characters."

        if errors:
            raise ValidationError(
                message="; ".join(errors.values()),
                errors=errors,
            )
        self.tags = normalized

    def mark_loaded(self) -> None:
        self._old_tags = self.tags or ""

    @property
    def old_tags(self) -> str:
        return self._old_tags

    # ── Queries on the record itself ──────────────────────────────────────

    def get_tags_list(self) -> List[str]:
        return Tag.string_to_list(self.tags)

    def is_author(self, current_user_id: Optional[int]) -> bool:
        """True when current_user_id wrote this question."""
        return current_user_id is not None and self.user_id == current_user_id

    def is_user_unique(self, current_user_id: Optional[int]) -> bool:
        """True when current_user_id is someone other than the author."""
        return self.user_id != current_user_id

    def is_draft(self) -> bool:
        return self.status == QuestionStatus.DRAFT

    @staticmethod
    def have_draft(data: Mapping[str, Any]) -> bool:
        """True when submitted form data asks to keep the question as a draft."""
        return "draft" in data

    # ── Counters ──────────────────────────────────────────────────────────

    @classmethod
    def update_counters(cls, question_id: int, **deltas: int) -> Update:
        """
        Builds a single UPDATE adding each delta to its counter column:

            Question.update_counters(5, answers=1)
            -> UPDATE qa_question SET answers = answers + 1 WHERE id = 5
        """
        values = {name: getattr(cls, name) + delta for name, delta in deltas.items()}
        return (
            update(cls)
            .where(cls.id == question_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )

    def __repr__(self) -> str:
        return (
            f"<Question(id={self.id}, alias='{self.alias}', "
            f"status={self.status})>"
        )

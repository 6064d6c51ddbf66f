"""
Q&A Questions — Favorite SQLAlchemy Model
==========================================

What:  A user bookmarking a question. At most one row per (user, question).
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from qa.database import Base
from qa.models.question import utcnow


class Favorite(Base):
    __tablename__ = "qa_favorite"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("qa_user.id"), nullable=False)
    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("qa_question.id", deferrable=True, initially="DEFERRED"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        UniqueConstraint("user_id", "question_id", name="uq_qa_favorite_user_question"),
    )

    def __repr__(self) -> str:
        return f"<Favorite(user_id={self.user_id}, question_id={self.question_id})>"

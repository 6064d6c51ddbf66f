"""
Q&A Questions — Answer SQLAlchemy Model
========================================

What:  ORM model for the `qa_answer` table.
How:   question_id is a deferred foreign key without ON DELETE CASCADE; answers
       of a deleted question are removed by QuestionService as an explicit
       post-delete step (AnswerService.remove_all_for).
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from qa.database import Base
from qa.models.question import utcnow


class Answer(Base):
    __tablename__ = "qa_answer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("qa_user.id"), nullable=False)
    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("qa_question.id", deferrable=True, initially="DEFERRED"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default=text("0"))

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

    def __repr__(self) -> str:
        return f"<Answer(id={self.id}, question_id={self.question_id})>"

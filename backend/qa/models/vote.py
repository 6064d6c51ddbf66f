"""
Q&A Questions — Vote SQLAlchemy Model
======================================

What:  Up/down votes cast on questions and answers.
How:   One table for both targets: `entity` names the target kind and
       `entity_id` its primary key, so no foreign key is declared.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, SmallInteger, String, text
from sqlalchemy.orm import Mapped, mapped_column

from qa.database import Base
from qa.models.question import utcnow

ENTITY_QUESTION = "question"
ENTITY_ANSWER = "answer"


class Vote(Base):
    __tablename__ = "qa_vote"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("qa_user.id"), nullable=False)
    entity: Mapped[str] = mapped_column(String(32), nullable=False)
    entity_id: Mapped[int] = mapped_column(Integer, nullable=False)
    vote: Mapped[int] = mapped_column(SmallInteger, nullable=False, comment="+1 or -1")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_qa_vote_entity", "entity", "entity_id"),
    )

    def __repr__(self) -> str:
        return f"<Vote(entity='{self.entity}', entity_id={self.entity_id}, vote={self.vote})>"

"""
Q&A Questions — User SQLAlchemy Model
======================================

What:  Minimal identity table referenced by questions, answers, favorites
       and votes. The embedding application owns accounts and login; this
       module only needs an id and a display name.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from qa.database import Base


class User(Base):
    __tablename__ = "qa_user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"

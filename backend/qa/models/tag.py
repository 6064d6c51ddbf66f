"""
Q&A Questions — Tag SQLAlchemy Model
=====================================

What:  ORM model for the `qa_tag` table plus the tag-string codec shared by
       every record that stores tags as a delimited string.
How:   A question stores "php,yii"; one Tag row per distinct name keeps a
       global frequency (how many questions currently use it).
"""

from typing import Iterable, List

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from qa.config import settings
from qa.database import Base


class Tag(Base):
    """A tag name and the number of questions currently carrying it."""

    __tablename__ = "qa_tag"

    NAME_MAX_LENGTH = 64

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH),
        nullable=False,
        unique=True,
        comment="Tag name as typed by users (case preserved)",
    )

    frequency: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        server_default=text("1"),
        comment="Number of questions using this tag",
    )

    # ── Tag string codec ──────────────────────────────────────────────────

    @staticmethod
    def string_to_list(tags: str | None) -> List[str]:
        """
        Parses a delimited tags string into an ordered list of unique names.

        Tokens are trimmed, empty tokens dropped, and duplicates removed
        keeping the first occurrence:

            "php, yii,,php " -> ["php", "yii"]
        """
        if not tags:
            return []
        names: List[str] = []
        for token in tags.split(settings.tag_delimiter):
            name = token.strip()
            if name and name not in names:
                names.append(name)
        return names

    @staticmethod
    def list_to_string(tags: Iterable[str]) -> str:
        """Encodes tag names back to the stored format ("php,yii")."""
        return settings.tag_delimiter.join(tags)

    @classmethod
    def normalize(cls, tags: str | None) -> str:
        """Round-trips a tags string through the codec; idempotent."""
        return cls.list_to_string(cls.string_to_list(tags))

    def __repr__(self) -> str:
        return f"<Tag(name='{self.name}', frequency={self.frequency})>"

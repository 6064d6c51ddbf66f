"""
Q&A Questions — Tag Service (global tag frequencies)
=====================================================

What:  Keeps the `qa_tag` frequency table in step with the tags stored on
       questions.
How:   update_frequency(old, new) diffs the two tag strings: names only in
       `new` are incremented (created with frequency 1 when missing), names
       only in `old` are decremented, and rows that reach zero are deleted.
Who:   Called by QuestionService after every save and after a delete.
"""

import logging
from typing import List, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qa.models.tag import Tag

logger = logging.getLogger(__name__)


class TagService:
    """Frequency bookkeeping plus pass-throughs to the Tag string codec."""

    string_to_list = staticmethod(Tag.string_to_list)
    list_to_string = staticmethod(Tag.list_to_string)
    normalize = staticmethod(Tag.normalize)

    async def update_frequency(self, db: AsyncSession, old_tags: str | None, new_tags: str | None) -> None:
        """
        Applies the difference between two tag strings to the frequency table.

        Args:
            db: Async database session
            old_tags: Tags before the change ("" for a new question)
            new_tags: Tags after the change ("" for a deleted question)
        """
        old = Tag.string_to_list(old_tags)
        new = Tag.string_to_list(new_tags)

        added = [name for name in new if name not in old]
        removed = [name for name in old if name not in new]

        if added:
            await self._add_tags(db, added)
        if removed:
            await self._remove_tags(db, removed)
        logger.debug("Tag frequency updated: +%s -%s", added, removed)

    async def _add_tags(self, db: AsyncSession, names: Sequence[str]) -> None:
        await db.execute(
            update(Tag)
            .where(Tag.name.in_(names))
            .values(frequency=Tag.frequency + 1)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(select(Tag.name).where(Tag.name.in_(names)))
        existing = set(result.scalars().all())
        for name in names:
            if name not in existing:
                db.add(Tag(name=name, frequency=1))
        await db.flush()

    async def _remove_tags(self, db: AsyncSession, names: Sequence[str]) -> None:
        await db.execute(
            update(Tag)
            .where(Tag.name.in_(names))
            .values(frequency=Tag.frequency - 1)
            .execution_options(synchronize_session=False)
        )
        await db.execute(
            delete(Tag)
            .where(Tag.name.in_(names), Tag.frequency <= 0)
            .execution_options(synchronize_session=False)
        )

    async def get_frequency(self, db: AsyncSession, name: str) -> int:
        """Current frequency of a tag; 0 when no question uses it."""
        result = await db.execute(select(Tag.frequency).where(Tag.name == name))
        return result.scalar_one_or_none() or 0

    async def list_popular(self, db: AsyncSession, limit: int = 20) -> List[Tag]:
        """Most used tags first, for tag clouds and autocomplete."""
        result = await db.execute(
            select(Tag).order_by(Tag.frequency.desc(), Tag.name).limit(limit)
        )
        return list(result.scalars().all())


tag_service = TagService()

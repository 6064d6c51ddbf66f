"""
Q&A Questions — Favorite Service
=================================

What:  Adds, removes and checks user bookmarks on questions.
How:   Every call names the user explicitly; there is no ambient
       "current user".
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from qa.models.favorite import Favorite

logger = logging.getLogger(__name__)


class FavoriteService:

    async def exists(self, db: AsyncSession, user_id: int, question_id: int) -> bool:
        result = await db.execute(
            select(Favorite.id)
            .where(Favorite.user_id == user_id, Favorite.question_id == question_id)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def add(self, db: AsyncSession, user_id: int, question_id: int) -> Favorite:
        favorite = Favorite(user_id=user_id, question_id=question_id)
        db.add(favorite)
        await db.flush()
        logger.info("User %s favorited question %s", user_id, question_id)
        return favorite

    async def remove(self, db: AsyncSession, user_id: int, question_id: int) -> int:
        """Returns the number of rows removed (0 or 1)."""
        result = await db.execute(
            delete(Favorite)
            .where(Favorite.user_id == user_id, Favorite.question_id == question_id)
            .execution_options(synchronize_session=False)
        )
        logger.info("User %s unfavorited question %s", user_id, question_id)
        return result.rowcount

    async def remove_all_for(self, db: AsyncSession, question_id: int) -> int:
        result = await db.execute(
            delete(Favorite)
            .where(Favorite.question_id == question_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def list_for(self, db: AsyncSession, question_id: int) -> List[Favorite]:
        result = await db.execute(
            select(Favorite)
            .where(Favorite.question_id == question_id)
            .order_by(Favorite.created_at, Favorite.id)
        )
        return list(result.scalars().all())


favorite_service = FavoriteService()

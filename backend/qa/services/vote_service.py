"""
Q&A Questions — Vote Service
=============================

What:  Removes the votes attached to a question when it is deleted.
"""

import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from qa.models.question import Question
from qa.models.vote import ENTITY_QUESTION, Vote

logger = logging.getLogger(__name__)


class VoteService:

    async def remove_all_for(self, db: AsyncSession, question: Question) -> int:
        """Deletes every vote cast on `question`; returns the number removed."""
        result = await db.execute(
            delete(Vote)
            .where(Vote.entity == ENTITY_QUESTION, Vote.entity_id == question.id)
            .execution_options(synchronize_session=False)
        )
        logger.debug("Removed %d votes of question %s", result.rowcount, question.id)
        return result.rowcount


vote_service = VoteService()

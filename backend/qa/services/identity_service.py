"""
Q&A Questions — Identity Service
=================================

What:  Resolves user ids to display names for rendering authors.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from qa.models.user import User


class IdentityService:

    async def get_user_name(self, db: AsyncSession, user_id: int) -> Optional[str]:
        """Display name of the user, or None when the account no longer exists."""
        result = await db.execute(select(User.username).where(User.id == user_id))
        return result.scalar_one_or_none()


identity_service = IdentityService()

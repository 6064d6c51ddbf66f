"""
Q&A Questions — Tag Frequency Tests
====================================

What:  Tests for TagService.update_frequency against an in-memory database.

What we test:
    ✅ New names are created with frequency 1
    ✅ Names present in both strings are untouched
    ✅ Removed names are decremented, and deleted at zero
    ✅ Popular tags come back most used first
"""

import pytest
from sqlalchemy import select

from qa.models import Tag
from qa.services.tag_service import TagService


class TestUpdateFrequency:

    def setup_method(self):
        self.service = TagService()

    async def names(self, db):
        result = await db.execute(select(Tag.name).order_by(Tag.name))
        return list(result.scalars().all())

    @pytest.mark.asyncio
    async def test_new_tags_start_at_one(self, db):
        await self.service.update_frequency(db, "", "php,yii")

        assert await self.service.get_frequency(db, "php") == 1
        assert await self.service.get_frequency(db, "yii") == 1

    @pytest.mark.asyncio
    async def test_existing_tags_are_incremented(self, db):
        await self.service.update_frequency(db, "", "php")
        await self.service.update_frequency(db, "", "php, orm")

        assert await self.service.get_frequency(db, "php") == 2
        assert await self.service.get_frequency(db, "orm") == 1

    @pytest.mark.asyncio
    async def test_unchanged_tags_keep_their_count(self, db):
        await self.service.update_frequency(db, "", "php,yii")
        await self.service.update_frequency(db, "php,yii", "yii,php")

        assert await self.service.get_frequency(db, "php") == 1
        assert await self.service.get_frequency(db, "yii") == 1

    @pytest.mark.asyncio
    async def test_removed_tag_at_zero_is_deleted(self, db):
        await self.service.update_frequency(db, "", "a,b")
        await self.service.update_frequency(db, "", "a")

        await self.service.update_frequency(db, "a,b", "")

        assert await self.service.get_frequency(db, "a") == 1
        assert await self.service.get_frequency(db, "b") == 0
        assert await self.names(db) == ["a"]

    @pytest.mark.asyncio
    async def test_unnormalized_input_is_parsed(self, db):
        await self.service.update_frequency(db, None, " x , x ,, y ")

        assert await self.names(db) == ["x", "y"]
        assert await self.service.get_frequency(db, "x") == 1

    @pytest.mark.asyncio
    async def test_removal_only_deletes_the_decremented_tags(self, db):
        db.add(Tag(name="stale", frequency=0))
        await db.flush()
        await self.service.update_frequency(db, "", "a")

        await self.service.update_frequency(db, "a", "")

        assert await self.names(db) == ["stale"]

    @pytest.mark.asyncio
    async def test_unknown_tag_frequency_is_zero(self, db):
        assert await self.service.get_frequency(db, "nothing") == 0


class TestListPopular:

    @pytest.mark.asyncio
    async def test_most_used_first(self, db):
        service = TagService()
        await service.update_frequency(db, "", "rare,common")
        await service.update_frequency(db, "", "common")

        popular = await service.list_popular(db, limit=1)
        assert [tag.name for tag in popular] == ["common"]

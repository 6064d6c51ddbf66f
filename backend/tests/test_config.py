"""
Q&A Questions — Settings Tests
===============================
"""

import pytest
from pydantic import ValidationError

from qa.config import Settings


class TestSettings:

    def test_log_level_is_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_is_sqlite(self):
        assert Settings(database_url="sqlite+aiosqlite:///:memory:").is_sqlite is True
        assert Settings(database_url="postgresql+asyncpg://u:p@h/db").is_sqlite is False

    def test_tag_delimiter_is_one_character(self):
        with pytest.raises(ValidationError):
            Settings(tag_delimiter=",;")

    def test_defaults(self):
        settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
        assert settings.tag_delimiter == ","
        assert settings.alias_max_length == 255

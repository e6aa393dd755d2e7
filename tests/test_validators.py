"""
Tests for input parsing, normalization and database URL handling.
"""

import pytest

from studio.core.exceptions import InvalidEntityIdError
from studio.core.validators import normalize_scope, parse_entity_id
from studio.db.postgres_adapter import PostgreSQLAdapter
from studio.db.session import get_database_adapter, normalize_database_url
from studio.db.sqlite_adapter import SQLiteAdapter


class TestParseEntityId:
    """Test path id parsing."""

    def test_valid_ids(self):
        assert parse_entity_id("1") == 1
        assert parse_entity_id("999999") == 999999
        assert parse_entity_id(" 42 ") == 42
        assert parse_entity_id("+7") == 7

    def test_invalid_ids(self):
        invalid_ids = ["abc", "12abc", "1.5", "", " ", "0x1f", "1 2"]
        for raw_id in invalid_ids:
            with pytest.raises(InvalidEntityIdError):
                parse_entity_id(raw_id)

    def test_oversized_digit_string_is_invalid(self):
        with pytest.raises(InvalidEntityIdError):
            parse_entity_id("1" * 5000)

    def test_error_keeps_raw_value(self):
        with pytest.raises(InvalidEntityIdError) as exc_info:
            parse_entity_id("abc")
        assert exc_info.value.raw_id == "abc"


class TestNormalizeScope:
    """Test project scope normalization."""

    def test_comma_separated_string(self):
        assert normalize_scope("Space planning, Lighting design ,Art curation") == [
            "Space planning",
            "Lighting design",
            "Art curation",
        ]

    def test_empty_pieces_are_dropped(self):
        assert normalize_scope("a,, b,") == ["a", "b"]
        assert normalize_scope("") == []

    def test_lists_and_none_pass_through(self):
        assert normalize_scope(["  kept as is "]) == ["  kept as is "]
        assert normalize_scope(None) is None


class TestDatabaseUrls:
    """Test async driver URL rewriting and adapter selection."""

    def test_plain_urls_get_async_drivers(self):
        assert normalize_database_url("postgres://u:p@db:5432/site") == "postgresql+asyncpg://u:p@db:5432/site"
        assert normalize_database_url("postgresql://u:p@db/site") == "postgresql+asyncpg://u:p@db/site"
        assert normalize_database_url("sqlite:///./studio.db") == "sqlite+aiosqlite:///./studio.db"

    def test_driver_urls_are_unchanged(self):
        for url in ("postgresql+asyncpg://u:p@db/site", "sqlite+aiosqlite:///./studio.db"):
            assert normalize_database_url(url) == url

    def test_adapter_selection(self):
        assert isinstance(get_database_adapter("sqlite+aiosqlite:///./studio.db"), SQLiteAdapter)
        assert isinstance(get_database_adapter("postgresql+asyncpg://u:p@db/site"), PostgreSQLAdapter)

    def test_unsupported_scheme(self):
        with pytest.raises(ValueError):
            get_database_adapter("mysql+aiomysql://u:p@db/site")

"""Tests for the asyncpg user directory."""

from uuid import uuid4

import pytest

from inventory_access.core.value_objects import UserId
from inventory_access.features.users.repositories import AsyncPGUserDirectory


class TestAsyncPGUserDirectory:

    @pytest.fixture
    def directory(self, mock_database_service):
        return AsyncPGUserDirectory(mock_database_service)

    @pytest.mark.asyncio
    async def test_lookup_is_case_insensitive(self, directory, mock_connection):
        user_id = uuid4()
        mock_connection.fetchrow.return_value = {
            "id": user_id, "username": "Bob", "is_admin": False, "is_active": True,
        }

        user = await directory.get_by_username("  bob ")

        assert user.id == UserId(user_id)
        assert user.username == "Bob"
        query, username = mock_connection.fetchrow.call_args[0]
        assert "LOWER(username) = LOWER($1)" in query
        assert username == "bob"

    @pytest.mark.asyncio
    async def test_unknown_username(self, directory, mock_connection):
        mock_connection.fetchrow.return_value = None
        assert await directory.get_by_username("ghost") is None

    @pytest.mark.asyncio
    async def test_get_by_id(self, directory, mock_connection):
        user_id = uuid4()
        mock_connection.fetchrow.return_value = {
            "id": user_id, "username": "root", "is_admin": True, "is_active": False,
        }

        user = await directory.get_by_id(UserId(user_id))

        assert user.is_admin
        assert not user.is_active

"""Tests for the all-access grant registry service."""

from unittest.mock import AsyncMock

import pytest

from inventory_access.core.exceptions import (
    DuplicateGrantError,
    GrantNotFoundError,
    MissingFieldError,
    PermissionDeniedError,
    SelfGrantError,
    UserNotFoundError,
)
from inventory_access.core.value_objects import GrantId
from inventory_access.features.grants.services import GrantService


class TestCreateGrant:

    @pytest.mark.asyncio
    async def test_creates_grant(self, grant_service, store, alice, carol):
        grant = await grant_service.create_grant(alice, "carol")

        assert grant.grantor_user_id == alice.id
        assert grant.grantee_user_id == carol.id
        assert grant.grantee_username == "carol"
        assert list(store.grants) == [grant.id]

    @pytest.mark.asyncio
    async def test_self_grant_conflicts(self, grant_service, store, alice):
        with pytest.raises(SelfGrantError):
            await grant_service.create_grant(alice, "Alice")
        assert store.grants == {}

    @pytest.mark.asyncio
    async def test_duplicate_conflicts(self, grant_service, store, alice, carol):
        await grant_service.create_grant(alice, "carol")

        with pytest.raises(DuplicateGrantError):
            await grant_service.create_grant(alice, "carol")
        assert len(store.grants) == 1

    @pytest.mark.asyncio
    async def test_reverse_direction_is_a_separate_grant(self, grant_service, alice, carol):
        await grant_service.create_grant(alice, "carol")
        await grant_service.create_grant(carol, "alice")

    @pytest.mark.asyncio
    async def test_unknown_grantee(self, grant_service, alice):
        with pytest.raises(UserNotFoundError):
            await grant_service.create_grant(alice, "ghost")

    @pytest.mark.asyncio
    async def test_blank_username(self, grant_service, alice):
        with pytest.raises(MissingFieldError):
            await grant_service.create_grant(alice, "")


class TestRevokeGrant:

    @pytest.mark.asyncio
    async def test_grantor_revokes(self, grant_service, store, alice, carol):
        grant = await grant_service.create_grant(alice, "carol")

        await grant_service.revoke_grant(alice, grant.id)

        assert store.grants == {}

    @pytest.mark.asyncio
    async def test_grantee_cannot_revoke(self, grant_service, store, alice, carol):
        grant = await grant_service.create_grant(alice, "carol")

        with pytest.raises(PermissionDeniedError):
            await grant_service.revoke_grant(carol, grant.id)
        assert grant.id in store.grants

    @pytest.mark.asyncio
    async def test_missing_grant(self, grant_service, alice):
        with pytest.raises(GrantNotFoundError):
            await grant_service.revoke_grant(alice, GrantId.generate())


class TestListGrants:

    @pytest.mark.asyncio
    async def test_given_and_received(self, grant_service, alice, bob, carol):
        await grant_service.create_grant(alice, "carol")
        await grant_service.create_grant(bob, "carol")

        given = await grant_service.list_grants_given(alice)
        received = await grant_service.list_grants_received(carol)

        assert [g.grantee_username for g in given] == ["carol"]
        assert {g.grantor_username for g in received} == {"alice", "bob"}
        assert await grant_service.list_grants_received(alice) == []


class TestGrantServiceWithMocks:

    @pytest.fixture
    def mock_grant_repository(self):
        return AsyncMock()

    @pytest.fixture
    def mock_user_directory(self):
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_repository_not_touched_when_grantee_missing(
        self, mock_grant_repository, mock_user_directory, alice
    ):
        mock_user_directory.get_by_username.return_value = None
        service = GrantService(mock_grant_repository, mock_user_directory)

        with pytest.raises(UserNotFoundError):
            await service.create_grant(alice, "ghost")

        mock_grant_repository.exists.assert_not_called()
        mock_grant_repository.create.assert_not_called()

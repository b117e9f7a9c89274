"""Scenarios crossing shares, grants, transfers and resolution."""

import pytest

from inventory_access.core.exceptions import (
    DuplicateShareError,
    PermissionDeniedError,
    SelfShareError,
    UserNotFoundError,
)
from inventory_access.core.value_objects import PermissionLevel
from inventory_access.features.permissions.utils import require_level


class TestShareLifecycle:

    @pytest.mark.asyncio
    async def test_share_update_delete(self, share_service, resolver, inventory, alice, bob):
        share = await share_service.create_share(alice, inventory.id, "bob", "edit_items")
        assert await resolver.resolve(bob, inventory.id) == PermissionLevel.EDIT_ITEMS

        await share_service.update_share(alice, share.id, "edit_inventory")
        assert await resolver.resolve(bob, inventory.id) == PermissionLevel.EDIT_INVENTORY

        await share_service.delete_share(alice, share.id)
        assert await resolver.resolve(bob, inventory.id) == PermissionLevel.NONE

    @pytest.mark.asyncio
    async def test_conflicts_leave_one_row(self, share_service, store, inventory, alice, bob):
        await share_service.create_share(alice, inventory.id, "bob", "view")

        with pytest.raises(DuplicateShareError):
            await share_service.create_share(alice, inventory.id, "BOB", "edit_items")
        with pytest.raises(SelfShareError):
            await share_service.create_share(alice, inventory.id, "alice", "view")

        assert len(store.shares_on(inventory.id)) == 1


class TestGrantScenarios:

    @pytest.mark.asyncio
    async def test_grant_covers_later_inventories(self, grant_service, resolver, store, inventory, alice, carol):
        await grant_service.create_grant(alice, "carol")
        later = store.add_inventory(alice, name="Shed")

        assert await resolver.resolve(carol, inventory.id) == PermissionLevel.ALL_ACCESS
        assert await resolver.resolve(carol, later.id) == PermissionLevel.ALL_ACCESS

    @pytest.mark.asyncio
    async def test_share_and_grant_take_the_maximum(
        self, share_service, grant_service, resolver, inventory, alice, bob
    ):
        await share_service.create_share(alice, inventory.id, "bob", "edit_items")
        grant = await grant_service.create_grant(alice, "bob")

        assert await resolver.resolve(bob, inventory.id) == PermissionLevel.ALL_ACCESS

        await grant_service.revoke_grant(alice, grant.id)
        assert await resolver.resolve(bob, inventory.id) == PermissionLevel.EDIT_ITEMS

    @pytest.mark.asyncio
    async def test_grantee_cannot_reshare(self, grant_service, share_service, inventory, alice, bob, carol):
        await grant_service.create_grant(alice, "bob")

        with pytest.raises(PermissionDeniedError):
            await share_service.create_share(bob, inventory.id, "carol", "view")


class TestTransferScenarios:

    @pytest.mark.asyncio
    async def test_transfer_then_previous_owner_is_forbidden(
        self, transfer_service, share_service, resolver, store, inventory, alice, bob, dave
    ):
        await share_service.create_share(alice, inventory.id, "bob", "edit_items")

        result = await transfer_service.transfer_ownership(alice, inventory.id, "dave")

        assert result.new_owner == dave
        assert result.items_transferred == 3
        assert store.item_owners(inventory.id) == [dave.id] * 3
        assert store.shares_on(inventory.id) == []
        assert await resolver.resolve(alice, inventory.id) == PermissionLevel.NONE
        assert await resolver.resolve(bob, inventory.id) == PermissionLevel.NONE

        level = await resolver.resolve(alice, inventory.id)
        with pytest.raises(PermissionDeniedError):
            require_level(level, PermissionLevel.EDIT_ITEMS, "edit items", inventory_id=inventory.id)
        with pytest.raises(PermissionDeniedError):
            await share_service.create_share(alice, inventory.id, "bob", "view")
        with pytest.raises(PermissionDeniedError):
            await transfer_service.transfer_ownership(alice, inventory.id, "alice")

    @pytest.mark.asyncio
    async def test_transfer_to_missing_user_changes_nothing(
        self, transfer_service, share_service, store, inventory, alice, bob
    ):
        await share_service.create_share(alice, inventory.id, "bob", "view")
        shares_before = store.shares_on(inventory.id)

        with pytest.raises(UserNotFoundError):
            await transfer_service.transfer_ownership(alice, inventory.id, "nonexistent-user")

        assert store.inventories[inventory.id].owner_user_id == alice.id
        assert store.item_owners(inventory.id) == [alice.id] * 3
        assert store.shares_on(inventory.id) == shares_before

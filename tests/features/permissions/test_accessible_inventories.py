"""Tests for the accessible inventory listing."""

import pytest

from inventory_access.core.value_objects import PermissionLevel
from inventory_access.features.permissions.entities import PermissionSource


class TestAccessibleInventoryService:

    @pytest.mark.asyncio
    async def test_lists_owned_shared_and_granted(
        self, accessible_service, store, share_repository, grant_repository, alice, bob, carol
    ):
        own = store.add_inventory(bob, name="Bob's")
        shared = store.add_inventory(alice, name="Shared")
        granted = store.add_inventory(carol, name="Granted")
        store.add_inventory(carol, name="Second granted")
        unrelated = store.add_inventory(store.add_user("erin"), name="Unrelated")

        await share_repository.create(shared.id, bob.id, alice.id, PermissionLevel.VIEW)
        await grant_repository.create(carol.id, bob.id)

        entries = await accessible_service.list_accessible(bob)
        by_id = {entry.inventory.id: entry.decision for entry in entries}

        assert by_id[own.id].level == PermissionLevel.OWNER
        assert by_id[shared.id].level == PermissionLevel.VIEW
        assert by_id[shared.id].source == PermissionSource.INVENTORY_SHARE
        assert by_id[granted.id].level == PermissionLevel.ALL_ACCESS
        assert unrelated.id not in by_id
        assert len(entries) == 4

    @pytest.mark.asyncio
    async def test_empty_for_new_user(self, accessible_service, inventory, dave):
        assert await accessible_service.list_accessible(dave) == []

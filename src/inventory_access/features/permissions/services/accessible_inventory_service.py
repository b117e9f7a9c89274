"""Listing of inventories a user can reach."""

import logging
from dataclasses import dataclass
from typing import List

from ...inventories.entities import Inventory, InventoryStore
from ...users.entities import User
from ..entities.access import AccessDecision
from .permission_resolver import PermissionResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessibleInventory:
    inventory: Inventory
    decision: AccessDecision


class AccessibleInventoryService:
    """Lists inventories the user owns, is shared on, or holds a grant for."""

    def __init__(self, inventory_store: InventoryStore, resolver: PermissionResolver):
        self.inventory_store = inventory_store
        self.resolver = resolver

    async def list_accessible(self, user: User) -> List[AccessibleInventory]:
        rows = await self.inventory_store.list_accessible(user.id)
        result = []
        for row in rows:
            decision = self.resolver.decide(
                user,
                row.inventory,
                share_level=row.share_level,
                has_grant=row.has_grant,
            )
            if decision.has_access:
                result.append(AccessibleInventory(inventory=row.inventory, decision=decision))
        logger.debug(f"User {user.id} can reach {len(result)} inventories")
        return result

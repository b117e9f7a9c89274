"""Permission resolver.

Combines ownership, inventory shares, all-access grants and the optional
admin policy into one effective level per (user, inventory). Every call
reads the store; results are never cached, so a revoked share or grant is
visible to the very next resolution.
"""

import logging
from typing import Optional

from ....core.exceptions import InventoryNotFoundError
from ....core.value_objects import InventoryId, PermissionLevel
from ...inventories.entities import Inventory, InventoryStore
from ...users.entities import User
from ..entities.access import AccessDecision, EffectivePermissions, PermissionSource
from ..entities.policy import AccessPolicy
from ..entities.protocols import ShareLevelLookup, GrantLookup

logger = logging.getLogger(__name__)


class PermissionResolver:
    """Resolves effective inventory permissions for a user."""

    def __init__(
        self,
        inventory_store: InventoryStore,
        share_lookup: ShareLevelLookup,
        grant_lookup: GrantLookup,
        policy: Optional[AccessPolicy] = None,
    ):
        self.inventory_store = inventory_store
        self.share_lookup = share_lookup
        self.grant_lookup = grant_lookup
        self.policy = policy or AccessPolicy()

    def decide(
        self,
        user: User,
        inventory: Inventory,
        share_level: Optional[PermissionLevel] = None,
        has_grant: bool = False,
    ) -> AccessDecision:
        """Combine already-fetched access sources into a decision.

        Ownership is terminal. Otherwise the highest candidate wins; on a tie
        the earlier source in (grant, share, admin policy) is reported.
        """
        if user.id == inventory.owner_user_id:
            return AccessDecision(user.id, inventory.id, PermissionLevel.OWNER, PermissionSource.OWNER)

        level, source = PermissionLevel.NONE, PermissionSource.NONE
        candidates = []
        if has_grant:
            candidates.append((PermissionLevel.ALL_ACCESS, PermissionSource.ALL_ACCESS))
        if share_level is not None:
            candidates.append((share_level, PermissionSource.INVENTORY_SHARE))
        if self.policy.admin_bypass_enabled and user.is_admin:
            candidates.append((PermissionLevel.ALL_ACCESS, PermissionSource.ADMIN_POLICY))

        for candidate_level, candidate_source in candidates:
            if candidate_level > level:
                level, source = candidate_level, candidate_source

        return AccessDecision(user.id, inventory.id, level, source)

    async def explain_inventory(self, user: User, inventory: Inventory, conn=None) -> AccessDecision:
        """Resolve against an inventory row the caller already loaded."""
        if user.id == inventory.owner_user_id:
            decision = self.decide(user, inventory)
        else:
            has_grant = await self.grant_lookup.exists(inventory.owner_user_id, user.id, conn=conn)
            share_level = await self.share_lookup.get_level(inventory.id, user.id, conn=conn)
            decision = self.decide(user, inventory, share_level=share_level, has_grant=has_grant)

        logger.debug(
            f"Resolved {decision.level} for user {user.id} on inventory {inventory.id} "
            f"via {decision.source.value}"
        )
        return decision

    async def explain(self, user: User, inventory_id: InventoryId, conn=None) -> AccessDecision:
        """Resolve the level and report which rule produced it.

        Raises:
            InventoryNotFoundError: If the inventory does not exist
        """
        inventory = await self.inventory_store.get(inventory_id, conn=conn)
        if inventory is None:
            raise InventoryNotFoundError(inventory_id)
        return await self.explain_inventory(user, inventory, conn=conn)

    async def resolve(self, user: User, inventory_id: InventoryId, conn=None) -> PermissionLevel:
        """Effective level of ``user`` on the inventory; ``none`` when no rule matches."""
        decision = await self.explain(user, inventory_id, conn=conn)
        return decision.level

    async def resolve_inventory(self, user: User, inventory: Inventory, conn=None) -> PermissionLevel:
        decision = await self.explain_inventory(user, inventory, conn=conn)
        return decision.level

    async def effective_permissions(self, user: User, inventory_id: InventoryId, conn=None) -> EffectivePermissions:
        decision = await self.explain(user, inventory_id, conn=conn)
        return EffectivePermissions.from_decision(decision)

"""Access decision entities.

An AccessDecision is what the resolver produces for one (user, inventory)
pair; EffectivePermissions spells that decision out as capability flags.
"""

from dataclasses import dataclass
from enum import Enum

from ....core.value_objects import InventoryId, UserId, PermissionLevel


class PermissionSource(str, Enum):
    """Which rule produced the effective level."""

    OWNER = "owner"
    ALL_ACCESS = "all_access"
    INVENTORY_SHARE = "inventory_share"
    ADMIN_POLICY = "admin_policy"
    NONE = "none"


@dataclass(frozen=True)
class AccessDecision:
    """Resolved level for a user on an inventory and where it came from."""

    user_id: UserId
    inventory_id: InventoryId
    level: PermissionLevel
    source: PermissionSource

    @property
    def has_access(self) -> bool:
        return self.level > PermissionLevel.NONE


@dataclass(frozen=True)
class EffectivePermissions:
    """Capability flags derived from a resolved level."""

    inventory_id: InventoryId
    level: PermissionLevel
    permission_source: PermissionSource
    can_view: bool
    can_edit_items: bool
    can_add_items: bool
    can_remove_items: bool
    can_edit_inventory: bool
    can_manage_organizers: bool
    can_delete_inventory: bool
    can_manage_sharing: bool
    can_transfer_ownership: bool
    is_owner: bool
    has_all_access: bool

    @classmethod
    def from_decision(cls, decision: AccessDecision) -> "EffectivePermissions":
        level = decision.level
        is_owner = level == PermissionLevel.OWNER
        can_edit_inventory = level >= PermissionLevel.EDIT_INVENTORY
        return cls(
            inventory_id=decision.inventory_id,
            level=level,
            permission_source=decision.source,
            can_view=level >= PermissionLevel.VIEW,
            can_edit_items=level >= PermissionLevel.EDIT_ITEMS,
            can_add_items=can_edit_inventory,
            can_remove_items=can_edit_inventory,
            can_edit_inventory=can_edit_inventory,
            can_manage_organizers=can_edit_inventory,
            can_delete_inventory=level >= PermissionLevel.ALL_ACCESS,
            can_manage_sharing=is_owner,
            can_transfer_ownership=is_owner,
            is_owner=is_owner,
            has_all_access=level >= PermissionLevel.ALL_ACCESS,
        )

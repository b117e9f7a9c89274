"""Permission response models."""

from typing import List

from pydantic import BaseModel, Field

from ..entities.access import EffectivePermissions
from ..services.accessible_inventory_service import AccessibleInventory


class EffectivePermissionsResponse(BaseModel):
    """Capability flags of the acting user on one inventory."""

    inventory_id: int = Field(..., description="Inventory ID")
    permission_level: str = Field(..., description="Resolved permission level")
    permission_source: str = Field(..., description="Rule that produced the level")
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
    def from_entity(cls, permissions: EffectivePermissions) -> "EffectivePermissionsResponse":
        return cls(
            inventory_id=permissions.inventory_id.value,
            permission_level=permissions.level.value,
            permission_source=permissions.permission_source.value,
            can_view=permissions.can_view,
            can_edit_items=permissions.can_edit_items,
            can_add_items=permissions.can_add_items,
            can_remove_items=permissions.can_remove_items,
            can_edit_inventory=permissions.can_edit_inventory,
            can_manage_organizers=permissions.can_manage_organizers,
            can_delete_inventory=permissions.can_delete_inventory,
            can_manage_sharing=permissions.can_manage_sharing,
            can_transfer_ownership=permissions.can_transfer_ownership,
            is_owner=permissions.is_owner,
            has_all_access=permissions.has_all_access,
        )


class AccessibleInventoryResponse(BaseModel):
    id: int = Field(..., description="Inventory ID")
    name: str = Field(..., description="Inventory name")
    owner_user_id: str = Field(..., description="Current owner")
    permission_level: str = Field(..., description="Resolved permission level")
    permission_source: str = Field(..., description="Rule that produced the level")

    @classmethod
    def from_entity(cls, entry: AccessibleInventory) -> "AccessibleInventoryResponse":
        return cls(
            id=entry.inventory.id.value,
            name=entry.inventory.name,
            owner_user_id=str(entry.inventory.owner_user_id),
            permission_level=entry.decision.level.value,
            permission_source=entry.decision.source.value,
        )


class AccessibleInventoryListResponse(BaseModel):
    inventories: List[AccessibleInventoryResponse] = Field(default_factory=list)
    total: int = Field(..., description="Number of accessible inventories")

"""Permission services."""

from .permission_resolver import PermissionResolver
from .accessible_inventory_service import AccessibleInventoryService, AccessibleInventory

__all__ = ["PermissionResolver", "AccessibleInventoryService", "AccessibleInventory"]

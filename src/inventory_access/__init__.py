"""inventory-access: access control for shared inventories.

Resolves what a user may do to an inventory from ownership, per-user shares
and all-access grants, and performs atomic ownership transfers.
"""

from .__version__ import __version__
from .core.exceptions import InventoryAccessError
from .core.value_objects import PermissionLevel, UserId, InventoryId, ShareId, GrantId

__all__ = [
    "__version__",
    "InventoryAccessError",
    "PermissionLevel",
    "UserId",
    "InventoryId",
    "ShareId",
    "GrantId",
]

"""Value objects for inventory-access.

Immutable identifiers and the ordered permission level used across the
resolver, registries and transfer orchestration.
"""

from .identifiers import (
    UserId,
    InventoryId,
    ShareId,
    GrantId,
)
from .permission_level import (
    PermissionLevel,
    SHAREABLE_LEVELS,
    LEGACY_ALIASES,
)

__all__ = [
    "UserId",
    "InventoryId",
    "ShareId",
    "GrantId",
    "PermissionLevel",
    "SHAREABLE_LEVELS",
    "LEGACY_ALIASES",
]

"""Permissions feature: the resolver, access policy and guards."""

from .entities import (
    PermissionSource,
    AccessDecision,
    EffectivePermissions,
    AccessPolicy,
    ShareLevelLookup,
    GrantLookup,
)
from .services import PermissionResolver, AccessibleInventoryService, AccessibleInventory
from .utils import require_level, require_owner

__all__ = [
    "PermissionSource",
    "AccessDecision",
    "EffectivePermissions",
    "AccessPolicy",
    "ShareLevelLookup",
    "GrantLookup",
    "PermissionResolver",
    "AccessibleInventoryService",
    "AccessibleInventory",
    "require_level",
    "require_owner",
]

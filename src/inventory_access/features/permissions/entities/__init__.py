"""Permission entities."""

from .access import PermissionSource, AccessDecision, EffectivePermissions
from .policy import AccessPolicy
from .protocols import ShareLevelLookup, GrantLookup

__all__ = [
    "PermissionSource",
    "AccessDecision",
    "EffectivePermissions",
    "AccessPolicy",
    "ShareLevelLookup",
    "GrantLookup",
]

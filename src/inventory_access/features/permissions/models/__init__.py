"""Permission API models."""

from .responses import (
    EffectivePermissionsResponse,
    AccessibleInventoryResponse,
    AccessibleInventoryListResponse,
)

__all__ = [
    "EffectivePermissionsResponse",
    "AccessibleInventoryResponse",
    "AccessibleInventoryListResponse",
]

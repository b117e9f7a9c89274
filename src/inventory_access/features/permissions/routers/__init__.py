"""Permission routers."""

from .permissions_router import router as permissions_router, parse_inventory_id
from .dependencies import get_permission_resolver, get_accessible_inventory_service

__all__ = [
    "permissions_router",
    "parse_inventory_id",
    "get_permission_resolver",
    "get_accessible_inventory_service",
]

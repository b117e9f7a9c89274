"""Shares feature: the per-inventory share registry.

Routers are not imported here; include them through
``inventory_access.infrastructure.fastapi.setup.setup_access_routers``.
"""

from .entities import InventoryShare, ShareRepository
from .repositories import AsyncPGShareRepository
from .services import ShareService

__all__ = ["InventoryShare", "ShareRepository", "AsyncPGShareRepository", "ShareService"]

"""AsyncPG-backed inventory and item store."""

import logging
from typing import List, Optional

from ....core.value_objects import InventoryId, UserId
from ...database.entities import ConnectionProvider
from ...database.utils.error_handling import database_error_handler, affected_rows
from ..entities.inventory import Inventory, InventoryAccessRow
from ..utils.queries import (
    INVENTORY_SELECT_BY_ID,
    INVENTORY_SELECT_FOR_UPDATE,
    INVENTORY_UPDATE_OWNER,
    ITEMS_LOCK_BY_INVENTORY,
    ITEMS_UPDATE_OWNER,
    INVENTORY_LIST_ACCESSIBLE,
)

logger = logging.getLogger(__name__)


class AsyncPGInventoryStore:
    """Reads inventories and rewrites ownership on inventories and items."""

    def __init__(self, database_service: ConnectionProvider):
        if not database_service:
            raise ValueError("Database service is required")
        self.database_service = database_service

    @database_error_handler("fetch inventory")
    async def get(self, inventory_id: InventoryId, conn=None) -> Optional[Inventory]:
        async with self.database_service.use_connection(conn) as c:
            row = await c.fetchrow(INVENTORY_SELECT_BY_ID, inventory_id.value)
        return Inventory.from_record(row) if row else None

    @database_error_handler("lock inventory")
    async def get_for_update(self, inventory_id: InventoryId, conn) -> Optional[Inventory]:
        row = await conn.fetchrow(INVENTORY_SELECT_FOR_UPDATE, inventory_id.value)
        return Inventory.from_record(row) if row else None

    @database_error_handler("lock inventory items")
    async def lock_items(self, inventory_id: InventoryId, conn) -> int:
        rows = await conn.fetch(ITEMS_LOCK_BY_INVENTORY, inventory_id.value)
        logger.debug(f"Locked {len(rows)} items of inventory {inventory_id}")
        return len(rows)

    @database_error_handler("update inventory owner")
    async def set_owner(self, inventory_id: InventoryId, owner_id: UserId, conn) -> None:
        await conn.execute(INVENTORY_UPDATE_OWNER, inventory_id.value, owner_id.value)

    @database_error_handler("reassign item owners")
    async def reassign_item_owners(self, inventory_id: InventoryId, owner_id: UserId, conn) -> int:
        status = await conn.execute(ITEMS_UPDATE_OWNER, inventory_id.value, owner_id.value)
        return affected_rows(status)

    @database_error_handler("list accessible inventories")
    async def list_accessible(self, user_id: UserId, conn=None) -> List[InventoryAccessRow]:
        async with self.database_service.use_connection(conn) as c:
            rows = await c.fetch(INVENTORY_LIST_ACCESSIBLE, user_id.value)
        return [InventoryAccessRow.from_record(row) for row in rows]

"""AsyncPG-backed share repository."""

import logging
from typing import List, Optional

import asyncpg

from ....core.exceptions import DuplicateShareError
from ....core.value_objects import InventoryId, ShareId, UserId, PermissionLevel
from ...database.entities import ConnectionProvider
from ...database.utils.error_handling import database_error_handler, affected_rows
from ..entities.share import InventoryShare
from ..utils.queries import (
    SHARE_INSERT,
    SHARE_SELECT_BY_ID,
    SHARE_SELECT_FOR_USER,
    SHARE_SELECT_LEVEL,
    SHARE_UPDATE_LEVEL,
    SHARE_DELETE,
    SHARE_DELETE_BY_INVENTORY,
    SHARE_LIST_BY_INVENTORY,
    SHARE_LIST_GIVEN,
    SHARE_LIST_RECEIVED,
)

logger = logging.getLogger(__name__)


class AsyncPGShareRepository:
    """Stores shares in ``inventory_shares``."""

    def __init__(self, database_service: ConnectionProvider):
        if not database_service:
            raise ValueError("Database service is required")
        self.database_service = database_service

    @database_error_handler("create share")
    async def create(
        self,
        inventory_id: InventoryId,
        shared_with_user_id: UserId,
        shared_by_user_id: UserId,
        level: PermissionLevel,
        conn=None
    ) -> InventoryShare:
        async with self.database_service.use_connection(conn) as c:
            try:
                row = await c.fetchrow(
                    SHARE_INSERT,
                    inventory_id.value,
                    shared_with_user_id.value,
                    shared_by_user_id.value,
                    level.value,
                )
            except asyncpg.UniqueViolationError:
                # Lost the race against a concurrent insert of the same pair
                raise DuplicateShareError("Inventory is already shared with this user")
        return InventoryShare.from_record(row)

    @database_error_handler("fetch share")
    async def get(self, share_id: ShareId, conn=None) -> Optional[InventoryShare]:
        async with self.database_service.use_connection(conn) as c:
            row = await c.fetchrow(SHARE_SELECT_BY_ID, share_id.value)
        return InventoryShare.from_record(row) if row else None

    @database_error_handler("fetch share for user")
    async def get_for_user(self, inventory_id: InventoryId, user_id: UserId, conn=None) -> Optional[InventoryShare]:
        async with self.database_service.use_connection(conn) as c:
            row = await c.fetchrow(SHARE_SELECT_FOR_USER, inventory_id.value, user_id.value)
        return InventoryShare.from_record(row) if row else None

    @database_error_handler("fetch share level")
    async def get_level(self, inventory_id: InventoryId, user_id: UserId, conn=None) -> Optional[PermissionLevel]:
        async with self.database_service.use_connection(conn) as c:
            raw = await c.fetchval(SHARE_SELECT_LEVEL, inventory_id.value, user_id.value)
        return PermissionLevel.parse(raw) if raw else None

    @database_error_handler("update share")
    async def update_level(self, share_id: ShareId, level: PermissionLevel, conn=None) -> Optional[InventoryShare]:
        async with self.database_service.use_connection(conn) as c:
            row = await c.fetchrow(SHARE_UPDATE_LEVEL, share_id.value, level.value)
        return InventoryShare.from_record(row) if row else None

    @database_error_handler("delete share")
    async def delete(self, share_id: ShareId, conn=None) -> bool:
        async with self.database_service.use_connection(conn) as c:
            status = await c.execute(SHARE_DELETE, share_id.value)
        return affected_rows(status) > 0

    @database_error_handler("delete inventory shares")
    async def delete_for_inventory(self, inventory_id: InventoryId, conn) -> int:
        status = await conn.execute(SHARE_DELETE_BY_INVENTORY, inventory_id.value)
        return affected_rows(status)

    @database_error_handler("list inventory shares")
    async def list_for_inventory(self, inventory_id: InventoryId, conn=None) -> List[InventoryShare]:
        async with self.database_service.use_connection(conn) as c:
            rows = await c.fetch(SHARE_LIST_BY_INVENTORY, inventory_id.value)
        return [InventoryShare.from_record(row) for row in rows]

    @database_error_handler("list shares given")
    async def list_given(self, owner_id: UserId, conn=None) -> List[InventoryShare]:
        async with self.database_service.use_connection(conn) as c:
            rows = await c.fetch(SHARE_LIST_GIVEN, owner_id.value)
        return [InventoryShare.from_record(row) for row in rows]

    @database_error_handler("list shares received")
    async def list_received(self, user_id: UserId, conn=None) -> List[InventoryShare]:
        async with self.database_service.use_connection(conn) as c:
            rows = await c.fetch(SHARE_LIST_RECEIVED, user_id.value)
        return [InventoryShare.from_record(row) for row in rows]

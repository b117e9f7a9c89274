"""Inventory share entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ....core.value_objects import InventoryId, ShareId, UserId, PermissionLevel


@dataclass(frozen=True)
class InventoryShare:
    """A per-user grant on one inventory at a stored level.

    At most one share exists per (inventory, user) and never for the
    inventory's owner. ``shared_by_user_id`` is the owner who created it.
    """

    id: ShareId
    inventory_id: InventoryId
    shared_with_user_id: UserId
    shared_by_user_id: UserId
    permission_level: PermissionLevel
    created_at: datetime
    updated_at: datetime
    shared_with_username: Optional[str] = None
    shared_by_username: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "InventoryShare":
        return cls(
            id=ShareId(record["id"]),
            inventory_id=InventoryId(record["inventory_id"]),
            shared_with_user_id=UserId(record["shared_with_user_id"]),
            shared_by_user_id=UserId(record["shared_by_user_id"]),
            permission_level=PermissionLevel.parse(record["permission_level"]),
            created_at=record["created_at"],
            updated_at=record["updated_at"],
            shared_with_username=record.get("shared_with_username"),
            shared_by_username=record.get("shared_by_username"),
        )

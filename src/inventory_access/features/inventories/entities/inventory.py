"""Inventory domain entities."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ....core.value_objects import InventoryId, UserId, PermissionLevel


@dataclass(frozen=True)
class Inventory:
    """An inventory row as seen by the access-control core.

    The owner changes only through ownership transfer.
    """

    id: InventoryId
    owner_user_id: UserId
    name: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Inventory":
        return cls(
            id=InventoryId(record["id"]),
            owner_user_id=UserId(record["owner_user_id"]),
            name=record.get("name") or "",
        )


@dataclass(frozen=True)
class InventoryAccessRow:
    """An inventory reachable by a user, with the raw access sources.

    ``share_level`` is the stored level of the user's share, if any;
    ``has_grant`` says whether the owner granted the user all access.
    """

    inventory: Inventory
    share_level: Optional[PermissionLevel] = None
    has_grant: bool = False

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "InventoryAccessRow":
        raw_level = record.get("share_level")
        return cls(
            inventory=Inventory.from_record(record),
            share_level=PermissionLevel.parse(raw_level) if raw_level else None,
            has_grant=bool(record.get("has_grant", False)),
        )

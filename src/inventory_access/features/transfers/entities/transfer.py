"""Ownership transfer result."""

from dataclasses import dataclass

from ....core.value_objects import InventoryId, UserId
from ...users.entities import User


@dataclass(frozen=True)
class TransferResult:
    inventory_id: InventoryId
    previous_owner_id: UserId
    new_owner: User
    items_transferred: int
    shares_removed: int

"""Protocols for the inventory and item store."""

from abc import abstractmethod
from typing import Any, List, Optional, Protocol, runtime_checkable

from ....core.value_objects import InventoryId, UserId
from .inventory import Inventory, InventoryAccessRow


@runtime_checkable
class InventoryStore(Protocol):
    """Inventory and item persistence used by the access-control core.

    Mutating methods expect the connection of an open transaction.
    """

    @abstractmethod
    async def get(self, inventory_id: InventoryId, conn: Optional[Any] = None) -> Optional[Inventory]:
        """Get an inventory by id."""
        ...

    @abstractmethod
    async def get_for_update(self, inventory_id: InventoryId, conn: Any) -> Optional[Inventory]:
        """Get an inventory and lock its row until the transaction ends."""
        ...

    @abstractmethod
    async def lock_items(self, inventory_id: InventoryId, conn: Any) -> int:
        """Lock every item row of the inventory; return how many were locked."""
        ...

    @abstractmethod
    async def set_owner(self, inventory_id: InventoryId, owner_id: UserId, conn: Any) -> None:
        """Point the inventory at a new owner."""
        ...

    @abstractmethod
    async def reassign_item_owners(self, inventory_id: InventoryId, owner_id: UserId, conn: Any) -> int:
        """Set the owner of every item in the inventory; return the count."""
        ...

    @abstractmethod
    async def list_accessible(self, user_id: UserId, conn: Optional[Any] = None) -> List[InventoryAccessRow]:
        """Inventories the user owns, is shared on, or reaches through a grant."""
        ...

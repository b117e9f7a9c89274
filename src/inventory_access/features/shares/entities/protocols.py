"""Protocols for share persistence."""

from abc import abstractmethod
from typing import Any, List, Optional, Protocol, runtime_checkable

from ....core.value_objects import InventoryId, ShareId, UserId, PermissionLevel
from .share import InventoryShare


@runtime_checkable
class ShareRepository(Protocol):
    """Storage of inventory shares.

    Also serves the permission resolver through ``get_level``.
    """

    @abstractmethod
    async def create(
        self,
        inventory_id: InventoryId,
        shared_with_user_id: UserId,
        shared_by_user_id: UserId,
        level: PermissionLevel,
        conn: Optional[Any] = None
    ) -> InventoryShare:
        """Insert a share; raise DuplicateShareError if the pair exists."""
        ...

    @abstractmethod
    async def get(self, share_id: ShareId, conn: Optional[Any] = None) -> Optional[InventoryShare]:
        ...

    @abstractmethod
    async def get_for_user(
        self,
        inventory_id: InventoryId,
        user_id: UserId,
        conn: Optional[Any] = None
    ) -> Optional[InventoryShare]:
        ...

    @abstractmethod
    async def get_level(
        self,
        inventory_id: InventoryId,
        user_id: UserId,
        conn: Optional[Any] = None
    ) -> Optional[PermissionLevel]:
        ...

    @abstractmethod
    async def update_level(
        self,
        share_id: ShareId,
        level: PermissionLevel,
        conn: Optional[Any] = None
    ) -> Optional[InventoryShare]:
        """Replace the stored level, keeping ``created_at``."""
        ...

    @abstractmethod
    async def delete(self, share_id: ShareId, conn: Optional[Any] = None) -> bool:
        ...

    @abstractmethod
    async def delete_for_inventory(self, inventory_id: InventoryId, conn: Any) -> int:
        """Delete every share on an inventory; return how many were removed."""
        ...

    @abstractmethod
    async def list_for_inventory(self, inventory_id: InventoryId, conn: Optional[Any] = None) -> List[InventoryShare]:
        ...

    @abstractmethod
    async def list_given(self, owner_id: UserId, conn: Optional[Any] = None) -> List[InventoryShare]:
        ...

    @abstractmethod
    async def list_received(self, user_id: UserId, conn: Optional[Any] = None) -> List[InventoryShare]:
        ...

"""Lookups the permission resolver depends on.

Kept narrow on purpose: the share and grant registries implement these on
their repositories.
"""

from abc import abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable

from ....core.value_objects import InventoryId, UserId, PermissionLevel


@runtime_checkable
class ShareLevelLookup(Protocol):
    """Finds the stored share level for a user on an inventory."""

    @abstractmethod
    async def get_level(
        self,
        inventory_id: InventoryId,
        user_id: UserId,
        conn: Optional[Any] = None
    ) -> Optional[PermissionLevel]:
        ...


@runtime_checkable
class GrantLookup(Protocol):
    """Checks whether a grantor gave a grantee all access."""

    @abstractmethod
    async def exists(
        self,
        grantor_id: UserId,
        grantee_id: UserId,
        conn: Optional[Any] = None
    ) -> bool:
        ...

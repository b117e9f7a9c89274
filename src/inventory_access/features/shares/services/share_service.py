"""Share registry service.

Only the current owner of an inventory may create, change, delete or list
its shares. An all-access grantee resolves below ``owner`` and is refused.

Every mutation runs in one transaction that first locks the inventory row,
the same lock an ownership transfer takes. A share write therefore either
completes before a transfer starts, and is removed by it, or waits and then
sees the new owner.
"""

import logging
from typing import List

from ....core.exceptions import (
    DuplicateShareError,
    InventoryNotFoundError,
    MissingFieldError,
    SelfShareError,
    ShareNotFoundError,
    UserNotFoundError,
)
from ....core.value_objects import InventoryId, ShareId, PermissionLevel
from ...database.entities import ConnectionProvider
from ...inventories.entities import Inventory, InventoryStore
from ...permissions.services import PermissionResolver
from ...permissions.utils import require_owner
from ...users.entities import User, UserDirectory
from ..entities.protocols import ShareRepository
from ..entities.share import InventoryShare

logger = logging.getLogger(__name__)


class ShareService:
    """Creates and manages per-user inventory shares."""

    def __init__(
        self,
        database_service: ConnectionProvider,
        inventory_store: InventoryStore,
        share_repository: ShareRepository,
        user_directory: UserDirectory,
        resolver: PermissionResolver,
    ):
        self.database_service = database_service
        self.inventory_store = inventory_store
        self.share_repository = share_repository
        self.user_directory = user_directory
        self.resolver = resolver

    async def _lock_owned_inventory(self, acting_user: User, inventory_id: InventoryId, action: str, conn) -> Inventory:
        inventory = await self.inventory_store.get_for_update(inventory_id, conn)
        if inventory is None:
            raise InventoryNotFoundError(inventory_id)
        level = await self.resolver.resolve_inventory(acting_user, inventory, conn=conn)
        require_owner(level, action, inventory_id=inventory_id)
        return inventory

    async def create_share(
        self,
        acting_user: User,
        inventory_id: InventoryId,
        grantee_username: str,
        level,
    ) -> InventoryShare:
        """Share an inventory with another user.

        Args:
            acting_user: Must own the inventory
            inventory_id: Inventory to share
            grantee_username: Username of the user receiving access
            level: ``view``, ``edit_items`` or ``edit_inventory`` (legacy
                ``edit``/``full`` accepted)

        Raises:
            InventoryNotFoundError: Inventory does not exist
            PermissionDeniedError: Acting user is not the owner
            InvalidPermissionLevelError: Level is not storable on a share
            MissingFieldError: Blank username
            UserNotFoundError: No such grantee
            SelfShareError: Grantee is the owner
            DuplicateShareError: The pair is already shared
        """
        async with self.database_service.transaction() as conn:
            inventory = await self._lock_owned_inventory(acting_user, inventory_id, "share this inventory", conn)

            share_level = PermissionLevel.parse_share_level(level)
            if not grantee_username or not grantee_username.strip():
                raise MissingFieldError("shared_with_username")

            grantee = await self.user_directory.get_by_username(grantee_username, conn=conn)
            if grantee is None:
                raise UserNotFoundError(grantee_username.strip())
            if grantee.id == inventory.owner_user_id:
                raise SelfShareError("Cannot share an inventory with its owner")

            existing = await self.share_repository.get_for_user(inventory_id, grantee.id, conn=conn)
            if existing is not None:
                raise DuplicateShareError(
                    f"Inventory is already shared with {grantee.username}; update the existing share instead"
                )

            share = await self.share_repository.create(
                inventory_id=inventory_id,
                shared_with_user_id=grantee.id,
                shared_by_user_id=acting_user.id,
                level=share_level,
                conn=conn,
            )

        logger.info(
            f"User {acting_user.id} shared inventory {inventory_id} with {grantee.id} "
            f"at {share_level.value}"
        )
        return share

    async def _get_owned_share(self, acting_user: User, share_id: ShareId, action: str, conn) -> InventoryShare:
        share = await self.share_repository.get(share_id, conn=conn)
        if share is None:
            raise ShareNotFoundError(share_id)
        await self._lock_owned_inventory(acting_user, share.inventory_id, action, conn)

        # A transfer that committed while we waited for the lock removed it
        locked = await self.share_repository.get(share_id, conn=conn)
        if locked is None:
            raise ShareNotFoundError(share_id)
        return locked

    async def update_share(self, acting_user: User, share_id: ShareId, new_level) -> InventoryShare:
        """Replace the level of an existing share in place."""
        async with self.database_service.transaction() as conn:
            share = await self._get_owned_share(acting_user, share_id, "update this share", conn)
            share_level = PermissionLevel.parse_share_level(new_level)

            updated = await self.share_repository.update_level(share_id, share_level, conn=conn)
            if updated is None:
                raise ShareNotFoundError(share_id)

        logger.info(
            f"User {acting_user.id} changed share {share_id} on inventory {share.inventory_id} "
            f"from {share.permission_level.value} to {share_level.value}"
        )
        return updated

    async def delete_share(self, acting_user: User, share_id: ShareId) -> None:
        async with self.database_service.transaction() as conn:
            share = await self._get_owned_share(acting_user, share_id, "delete this share", conn)
            if not await self.share_repository.delete(share_id, conn=conn):
                raise ShareNotFoundError(share_id)
        logger.info(f"User {acting_user.id} deleted share {share_id} on inventory {share.inventory_id}")

    async def list_inventory_shares(self, acting_user: User, inventory_id: InventoryId) -> List[InventoryShare]:
        level = await self.resolver.resolve(acting_user, inventory_id)
        require_owner(level, "view shares of this inventory", inventory_id=inventory_id)
        return await self.share_repository.list_for_inventory(inventory_id)

    async def list_shares_given(self, owner: User) -> List[InventoryShare]:
        return await self.share_repository.list_given(owner.id)

    async def list_shares_received(self, user: User) -> List[InventoryShare]:
        return await self.share_repository.list_received(user.id)

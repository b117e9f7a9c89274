"""Ownership transfer orchestration.

A transfer rewrites the inventory owner, the owner of every item in it and
deletes every share on it. All of it happens on one connection inside one
transaction with the inventory and item rows locked, so concurrent readers
see either the old state or the new one. Any failure rolls everything back.
"""

import logging

from ....core.exceptions import (
    InactiveUserError,
    InventoryNotFoundError,
    MissingFieldError,
    SameOwnerTransferError,
    UserNotFoundError,
)
from ....core.value_objects import InventoryId
from ...database.entities import ConnectionProvider
from ...inventories.entities import InventoryStore
from ...permissions.services import PermissionResolver
from ...permissions.utils import require_owner
from ...shares.entities import ShareRepository
from ...users.entities import User, UserDirectory
from ..entities.transfer import TransferResult

logger = logging.getLogger(__name__)


class OwnershipTransferService:
    """Hands an inventory, with its items, to another user."""

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

    async def transfer_ownership(
        self,
        acting_user: User,
        inventory_id: InventoryId,
        new_owner_username: str,
    ) -> TransferResult:
        """Transfer ownership of an inventory. Irreversible.

        Raises:
            InventoryNotFoundError: Inventory does not exist
            PermissionDeniedError: Acting user is not the owner
            MissingFieldError: Blank username
            UserNotFoundError: No such user
            SameOwnerTransferError: Target already owns the inventory
            InactiveUserError: Target account is deactivated
        """
        async with self.database_service.transaction() as conn:
            inventory = await self.inventory_store.get_for_update(inventory_id, conn)
            if inventory is None:
                raise InventoryNotFoundError(inventory_id)

            level = await self.resolver.resolve_inventory(acting_user, inventory, conn=conn)
            require_owner(level, "transfer ownership of this inventory", inventory_id=inventory_id)

            if not new_owner_username or not new_owner_username.strip():
                raise MissingFieldError("new_owner_username")
            new_owner = await self.user_directory.get_by_username(new_owner_username, conn=conn)
            if new_owner is None:
                raise UserNotFoundError(new_owner_username.strip())
            if new_owner.id == inventory.owner_user_id:
                raise SameOwnerTransferError("User already owns this inventory")
            if not new_owner.is_active:
                raise InactiveUserError(
                    f"Cannot transfer ownership to inactive user {new_owner.username}",
                    details={"user_id": str(new_owner.id)},
                )

            await self.inventory_store.lock_items(inventory.id, conn)
            await self.inventory_store.set_owner(inventory.id, new_owner.id, conn)
            items_transferred = await self.inventory_store.reassign_item_owners(inventory.id, new_owner.id, conn)
            shares_removed = await self.share_repository.delete_for_inventory(inventory.id, conn)

        logger.info(
            f"Transferred ownership of inventory {inventory_id} from {inventory.owner_user_id} "
            f"to {new_owner.id}. Items: {items_transferred}, Shares removed: {shares_removed}"
        )
        return TransferResult(
            inventory_id=inventory.id,
            previous_owner_id=inventory.owner_user_id,
            new_owner=new_owner,
            items_transferred=items_transferred,
            shares_removed=shares_removed,
        )

"""All-access grant registry service."""

import logging
from typing import List

from ....core.exceptions import (
    DuplicateGrantError,
    GrantNotFoundError,
    MissingFieldError,
    PermissionDeniedError,
    SelfGrantError,
    UserNotFoundError,
)
from ....core.value_objects import GrantId
from ...users.entities import User, UserDirectory
from ..entities.grant import AllAccessGrant
from ..entities.protocols import GrantRepository

logger = logging.getLogger(__name__)


class GrantService:
    """Creates, revokes and lists all-access grants.

    Granting is self-service: a user only ever grants access to their own
    inventories, so no inventory check applies. Only the grantor revokes.
    """

    def __init__(self, grant_repository: GrantRepository, user_directory: UserDirectory):
        self.grant_repository = grant_repository
        self.user_directory = user_directory

    async def create_grant(self, grantor: User, grantee_username: str) -> AllAccessGrant:
        if not grantee_username or not grantee_username.strip():
            raise MissingFieldError("grantee_username")

        grantee = await self.user_directory.get_by_username(grantee_username)
        if grantee is None:
            raise UserNotFoundError(grantee_username.strip())
        if grantee.id == grantor.id:
            raise SelfGrantError("Cannot grant all access to yourself")
        if await self.grant_repository.exists(grantor.id, grantee.id):
            raise DuplicateGrantError(f"All access has already been granted to {grantee.username}")

        grant = await self.grant_repository.create(grantor.id, grantee.id)
        logger.info(f"User {grantor.id} granted all access to {grantee.id} (grant {grant.id})")
        return grant

    async def revoke_grant(self, acting_user: User, grant_id: GrantId) -> None:
        """Delete a grant. Takes effect on the next resolution."""
        grant = await self.grant_repository.get(grant_id)
        if grant is None:
            raise GrantNotFoundError(grant_id)
        if grant.grantor_user_id != acting_user.id:
            logger.warning(f"User {acting_user.id} attempted to revoke grant {grant_id} they did not create")
            raise PermissionDeniedError(
                "Only the grantor can revoke an access grant",
                details={"grant_id": str(grant_id)},
            )

        if not await self.grant_repository.delete(grant_id):
            raise GrantNotFoundError(grant_id)
        logger.info(f"User {acting_user.id} revoked grant {grant_id} to {grant.grantee_user_id}")

    async def list_grants_given(self, grantor: User) -> List[AllAccessGrant]:
        return await self.grant_repository.list_given(grantor.id)

    async def list_grants_received(self, grantee: User) -> List[AllAccessGrant]:
        return await self.grant_repository.list_received(grantee.id)

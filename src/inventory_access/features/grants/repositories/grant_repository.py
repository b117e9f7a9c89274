"""AsyncPG-backed grant repository."""

import logging
from typing import List, Optional

import asyncpg

from ....core.exceptions import DuplicateGrantError, SelfGrantError
from ....core.value_objects import GrantId, UserId
from ...database.entities import ConnectionProvider
from ...database.utils.error_handling import database_error_handler, affected_rows
from ..entities.grant import AllAccessGrant
from ..utils.queries import (
    GRANT_INSERT,
    GRANT_SELECT_BY_ID,
    GRANT_EXISTS,
    GRANT_DELETE,
    GRANT_LIST_GIVEN,
    GRANT_LIST_RECEIVED,
)

logger = logging.getLogger(__name__)


class AsyncPGGrantRepository:
    """Stores grants in ``user_access_grants``."""

    def __init__(self, database_service: ConnectionProvider):
        if not database_service:
            raise ValueError("Database service is required")
        self.database_service = database_service

    @database_error_handler("create access grant")
    async def create(self, grantor_id: UserId, grantee_id: UserId, conn=None) -> AllAccessGrant:
        async with self.database_service.use_connection(conn) as c:
            try:
                row = await c.fetchrow(GRANT_INSERT, grantor_id.value, grantee_id.value)
            except asyncpg.UniqueViolationError:
                raise DuplicateGrantError("All access has already been granted to this user")
            except asyncpg.CheckViolationError:
                raise SelfGrantError("Cannot grant all access to yourself")
        return AllAccessGrant.from_record(row)

    @database_error_handler("fetch access grant")
    async def get(self, grant_id: GrantId, conn=None) -> Optional[AllAccessGrant]:
        async with self.database_service.use_connection(conn) as c:
            row = await c.fetchrow(GRANT_SELECT_BY_ID, grant_id.value)
        return AllAccessGrant.from_record(row) if row else None

    @database_error_handler("check access grant")
    async def exists(self, grantor_id: UserId, grantee_id: UserId, conn=None) -> bool:
        async with self.database_service.use_connection(conn) as c:
            return bool(await c.fetchval(GRANT_EXISTS, grantor_id.value, grantee_id.value))

    @database_error_handler("delete access grant")
    async def delete(self, grant_id: GrantId, conn=None) -> bool:
        async with self.database_service.use_connection(conn) as c:
            status = await c.execute(GRANT_DELETE, grant_id.value)
        return affected_rows(status) > 0

    @database_error_handler("list access grants given")
    async def list_given(self, grantor_id: UserId, conn=None) -> List[AllAccessGrant]:
        async with self.database_service.use_connection(conn) as c:
            rows = await c.fetch(GRANT_LIST_GIVEN, grantor_id.value)
        return [AllAccessGrant.from_record(row) for row in rows]

    @database_error_handler("list access grants received")
    async def list_received(self, grantee_id: UserId, conn=None) -> List[AllAccessGrant]:
        async with self.database_service.use_connection(conn) as c:
            rows = await c.fetch(GRANT_LIST_RECEIVED, grantee_id.value)
        return [AllAccessGrant.from_record(row) for row in rows]

"""AsyncPG-backed user directory."""

import logging
from typing import Optional

from ....core.value_objects import UserId
from ...database.entities import ConnectionProvider
from ...database.utils.error_handling import database_error_handler
from ..entities.user import User
from ..utils.queries import USER_SELECT_BY_USERNAME, USER_SELECT_BY_ID

logger = logging.getLogger(__name__)


class AsyncPGUserDirectory:
    """Looks users up in the ``users`` table."""

    def __init__(self, database_service: ConnectionProvider):
        if not database_service:
            raise ValueError("Database service is required")
        self.database_service = database_service

    @database_error_handler("look up user by username")
    async def get_by_username(self, username: str, conn=None) -> Optional[User]:
        async with self.database_service.use_connection(conn) as c:
            row = await c.fetchrow(USER_SELECT_BY_USERNAME, username.strip())
        if row is None:
            logger.debug(f"No user with username '{username}'")
            return None
        return User.from_record(row)

    @database_error_handler("look up user by id")
    async def get_by_id(self, user_id: UserId, conn=None) -> Optional[User]:
        async with self.database_service.use_connection(conn) as c:
            row = await c.fetchrow(USER_SELECT_BY_ID, user_id.value)
        return User.from_record(row) if row else None

"""Protocols for user lookups."""

from abc import abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable

from ....core.value_objects import UserId
from .user import User


@runtime_checkable
class UserDirectory(Protocol):
    """Read-only lookup of users by username or id."""

    @abstractmethod
    async def get_by_username(self, username: str, conn: Optional[Any] = None) -> Optional[User]:
        """Find a user by username, case-insensitively."""
        ...

    @abstractmethod
    async def get_by_id(self, user_id: UserId, conn: Optional[Any] = None) -> Optional[User]:
        """Find a user by id."""
        ...

"""Protocols for grant persistence."""

from abc import abstractmethod
from typing import Any, List, Optional, Protocol, runtime_checkable

from ....core.value_objects import GrantId, UserId
from .grant import AllAccessGrant


@runtime_checkable
class GrantRepository(Protocol):
    """Storage of all-access grants.

    Also serves the permission resolver through ``exists``.
    """

    @abstractmethod
    async def create(self, grantor_id: UserId, grantee_id: UserId, conn: Optional[Any] = None) -> AllAccessGrant:
        """Insert a grant; raise DuplicateGrantError if the pair exists."""
        ...

    @abstractmethod
    async def get(self, grant_id: GrantId, conn: Optional[Any] = None) -> Optional[AllAccessGrant]:
        ...

    @abstractmethod
    async def exists(self, grantor_id: UserId, grantee_id: UserId, conn: Optional[Any] = None) -> bool:
        ...

    @abstractmethod
    async def delete(self, grant_id: GrantId, conn: Optional[Any] = None) -> bool:
        ...

    @abstractmethod
    async def list_given(self, grantor_id: UserId, conn: Optional[Any] = None) -> List[AllAccessGrant]:
        ...

    @abstractmethod
    async def list_received(self, grantee_id: UserId, conn: Optional[Any] = None) -> List[AllAccessGrant]:
        ...

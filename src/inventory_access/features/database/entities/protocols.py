"""Protocols for the database layer."""

from abc import abstractmethod
from typing import Any, AsyncContextManager, Optional, Protocol, runtime_checkable


@runtime_checkable
class ConnectionProvider(Protocol):
    """Hands out connections and transactions to repositories."""

    @abstractmethod
    def get_connection(self) -> AsyncContextManager[Any]:
        """Acquire a pooled connection for the duration of the block."""
        ...

    @abstractmethod
    def transaction(self) -> AsyncContextManager[Any]:
        """Acquire a connection and open a transaction on it.

        Commits when the block exits normally, rolls back on any exception.
        """
        ...

    @abstractmethod
    def use_connection(self, conn: Optional[Any] = None) -> AsyncContextManager[Any]:
        """Reuse ``conn`` when given, otherwise acquire a fresh one."""
        ...

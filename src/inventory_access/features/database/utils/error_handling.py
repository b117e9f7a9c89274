"""Standardized error handling for database operations."""

import functools
import logging
from typing import Any, Callable

import asyncpg

from ....core.exceptions import DatabaseError, InventoryAccessError

logger = logging.getLogger(__name__)


def database_error_handler(operation_name: str, log_level: int = logging.ERROR):
    """Decorator that logs store failures and wraps them in DatabaseError.

    Domain errors raised inside the wrapped coroutine pass through untouched.

    Usage:
        @database_error_handler("fetch share")
        async def get_share(self, share_id, conn=None):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except InventoryAccessError:
                raise
            except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
                logger.log(log_level, f"Failed to {operation_name}: {e} | function={func.__name__}")
                raise DatabaseError(
                    f"Failed to {operation_name}",
                    details={"operation": operation_name, "reason": str(e)},
                ) from e

        return wrapper
    return decorator


def affected_rows(status: str) -> int:
    """Row count from an asyncpg command status such as ``UPDATE 3``."""
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0

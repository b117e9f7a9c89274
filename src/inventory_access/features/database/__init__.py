"""Database feature: asyncpg pool, connection scopes and settings."""

from .entities import DatabaseSettings, get_database_settings, ConnectionProvider
from .services import DatabaseService
from .utils import database_error_handler, affected_rows

__all__ = [
    "DatabaseSettings",
    "get_database_settings",
    "ConnectionProvider",
    "DatabaseService",
    "database_error_handler",
    "affected_rows",
]

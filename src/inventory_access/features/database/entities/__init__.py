"""Database entities."""

from .config import DatabaseSettings, get_database_settings
from .protocols import ConnectionProvider

__all__ = [
    "DatabaseSettings",
    "get_database_settings",
    "ConnectionProvider",
]

"""Users feature: read-only user directory."""

from .entities import User, UserDirectory
from .repositories import AsyncPGUserDirectory

__all__ = ["User", "UserDirectory", "AsyncPGUserDirectory"]

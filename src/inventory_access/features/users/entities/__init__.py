"""User entities."""

from .user import User
from .protocols import UserDirectory

__all__ = ["User", "UserDirectory"]

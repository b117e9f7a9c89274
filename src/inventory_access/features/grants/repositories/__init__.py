"""Grant repositories."""

from .grant_repository import AsyncPGGrantRepository

__all__ = ["AsyncPGGrantRepository"]

"""Grant services."""

from .grant_service import GrantService

__all__ = ["GrantService"]

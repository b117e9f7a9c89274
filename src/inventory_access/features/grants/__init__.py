"""Grants feature: the all-access grant registry."""

from .entities import AllAccessGrant, GrantRepository
from .repositories import AsyncPGGrantRepository
from .services import GrantService

__all__ = ["AllAccessGrant", "GrantRepository", "AsyncPGGrantRepository", "GrantService"]

"""Grant entities."""

from .grant import AllAccessGrant
from .protocols import GrantRepository

__all__ = ["AllAccessGrant", "GrantRepository"]

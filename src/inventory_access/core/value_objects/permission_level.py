"""Permission level value object.

Closed, totally ordered set of access levels a user can hold on an
inventory. Only the three middle levels are ever stored on a share;
``all_access`` and ``owner`` exist at resolution time only.
"""

from enum import Enum
from typing import Any, List

from ..exceptions import InvalidPermissionLevelError


class PermissionLevel(str, Enum):
    """Inventory permission levels, lowest to highest."""

    NONE = "none"
    VIEW = "view"
    EDIT_ITEMS = "edit_items"
    EDIT_INVENTORY = "edit_inventory"
    ALL_ACCESS = "all_access"
    OWNER = "owner"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    # str's ordering is lexical, so every comparison is spelled out by rank
    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, PermissionLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, PermissionLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, PermissionLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, PermissionLevel):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value

    @property
    def is_shareable(self) -> bool:
        """Whether this level may be stored on an inventory share."""
        return self in SHAREABLE_LEVELS

    @classmethod
    def parse(cls, value: Any) -> "PermissionLevel":
        """Parse any level name, accepting the legacy ``edit``/``full`` aliases."""
        if isinstance(value, PermissionLevel):
            return value
        if not isinstance(value, str):
            raise InvalidPermissionLevelError(value, allowed=[level.value for level in cls])
        normalized = value.strip().lower()
        normalized = LEGACY_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidPermissionLevelError(value, allowed=[level.value for level in cls])

    @classmethod
    def parse_share_level(cls, value: Any) -> "PermissionLevel":
        """Parse a level that is about to be stored on a share."""
        allowed = [level.value for level in SHAREABLE_LEVELS]
        try:
            level = cls.parse(value)
        except InvalidPermissionLevelError:
            raise InvalidPermissionLevelError(value, allowed=allowed)
        if not level.is_shareable:
            raise InvalidPermissionLevelError(value, allowed=allowed)
        return level


_RANKS = {level: rank for rank, level in enumerate(PermissionLevel)}

SHAREABLE_LEVELS: List[PermissionLevel] = [
    PermissionLevel.VIEW,
    PermissionLevel.EDIT_ITEMS,
    PermissionLevel.EDIT_INVENTORY,
]

LEGACY_ALIASES = {
    "edit": PermissionLevel.EDIT_ITEMS.value,
    "full": PermissionLevel.EDIT_INVENTORY.value,
}

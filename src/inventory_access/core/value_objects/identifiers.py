"""Value objects for identifiers in inventory-access.

Immutable wrappers that keep user, inventory, share and grant identifiers
from being mixed up across service and repository signatures.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

# inventories.id is a PostgreSQL SERIAL (int4)
MAX_INVENTORY_ID = 2147483647


def _coerce_uuid(value, type_name: str) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (ValueError, TypeError):
        raise ValueError(f"{type_name} must be a valid UUID, got: {value}")


@dataclass(frozen=True)
class UserId:
    """User identifier value object."""
    value: UUID

    def __post_init__(self):
        object.__setattr__(self, 'value', _coerce_uuid(self.value, "UserId"))

    @classmethod
    def generate(cls) -> 'UserId':
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class InventoryId:
    """Inventory identifier value object (serial integer key)."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool):
            raise ValueError(f"InventoryId must be an integer, got: {self.value!r}")
        try:
            coerced = int(self.value)
        except (ValueError, TypeError):
            raise ValueError(f"InventoryId must be an integer, got: {self.value!r}")
        if coerced <= 0:
            raise ValueError(f"InventoryId must be positive, got: {coerced}")
        if coerced > MAX_INVENTORY_ID:
            raise ValueError(f"InventoryId must not exceed {MAX_INVENTORY_ID}, got: {coerced}")
        object.__setattr__(self, 'value', coerced)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ShareId:
    """Inventory share identifier value object."""
    value: UUID

    def __post_init__(self):
        object.__setattr__(self, 'value', _coerce_uuid(self.value, "ShareId"))

    @classmethod
    def generate(cls) -> 'ShareId':
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class GrantId:
    """All-access grant identifier value object."""
    value: UUID

    def __post_init__(self):
        object.__setattr__(self, 'value', _coerce_uuid(self.value, "GrantId"))

    @classmethod
    def generate(cls) -> 'GrantId':
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)

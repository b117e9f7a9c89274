"""Share entities."""

from .share import InventoryShare
from .protocols import ShareRepository

__all__ = ["InventoryShare", "ShareRepository"]

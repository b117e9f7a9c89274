"""Inventory entities."""

from .inventory import Inventory, InventoryAccessRow
from .protocols import InventoryStore

__all__ = ["Inventory", "InventoryAccessRow", "InventoryStore"]

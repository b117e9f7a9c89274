"""Inventories feature: the inventory/item store seen by access control."""

from .entities import Inventory, InventoryAccessRow, InventoryStore
from .repositories import AsyncPGInventoryStore

__all__ = ["Inventory", "InventoryAccessRow", "InventoryStore", "AsyncPGInventoryStore"]

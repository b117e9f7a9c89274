"""Inventory repositories."""

from .inventory_store import AsyncPGInventoryStore

__all__ = ["AsyncPGInventoryStore"]

"""Feature modules of inventory-access."""

"""Root of the inventory-access exception hierarchy."""

from typing import Any, Dict, Optional


class InventoryAccessError(Exception):
    """Base exception for every access-control failure.

    ``error_code`` defaults to the class name so API clients can switch on it
    without parsing messages; ``details`` holds ids and levels involved in the
    failure.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

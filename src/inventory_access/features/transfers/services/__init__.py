"""Transfer services."""

from .ownership_transfer_service import OwnershipTransferService

__all__ = ["OwnershipTransferService"]

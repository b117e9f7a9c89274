"""Transfers feature: atomic ownership transfer."""

from .entities import TransferResult
from .services import OwnershipTransferService

__all__ = ["TransferResult", "OwnershipTransferService"]

"""Transfer entities."""

from .transfer import TransferResult

__all__ = ["TransferResult"]

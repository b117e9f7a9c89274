"""Transfer API models."""

from .requests import TransferOwnershipRequest
from .responses import TransferResponse, NewOwnerResponse

__all__ = ["TransferOwnershipRequest", "TransferResponse", "NewOwnerResponse"]

"""Share API models."""

from .requests import CreateShareRequest, UpdateShareRequest
from .responses import ShareResponse

__all__ = ["CreateShareRequest", "UpdateShareRequest", "ShareResponse"]

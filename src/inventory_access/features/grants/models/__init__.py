"""Grant API models."""

from .requests import CreateGrantRequest
from .responses import GrantResponse

__all__ = ["CreateGrantRequest", "GrantResponse"]

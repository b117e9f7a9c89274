"""Grant routers."""

from .grant_router import router as grant_router
from .dependencies import get_grant_service

__all__ = ["grant_router", "get_grant_service"]

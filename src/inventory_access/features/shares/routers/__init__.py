"""Share routers."""

from .share_router import router as share_router
from .dependencies import get_share_service

__all__ = ["share_router", "get_share_service"]

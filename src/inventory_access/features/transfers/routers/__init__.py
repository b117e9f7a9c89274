"""Transfer routers."""

from .transfer_router import router as transfer_router
from .dependencies import get_transfer_service

__all__ = ["transfer_router", "get_transfer_service"]

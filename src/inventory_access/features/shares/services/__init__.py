"""Share services."""

from .share_service import ShareService

__all__ = ["ShareService"]

"""Share repositories."""

from .share_repository import AsyncPGShareRepository

__all__ = ["AsyncPGShareRepository"]

"""User repositories."""

from .user_directory import AsyncPGUserDirectory

__all__ = ["AsyncPGUserDirectory"]

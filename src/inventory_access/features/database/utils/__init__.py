"""Database utilities."""

from .error_handling import database_error_handler, affected_rows

__all__ = ["database_error_handler", "affected_rows"]

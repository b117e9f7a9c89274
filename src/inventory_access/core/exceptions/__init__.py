"""Exceptions module for inventory-access.

Complete exception hierarchy, organized by the error taxonomy of the
access-control core and by infrastructure concerns.
"""

from .base import InventoryAccessError

from .domain import (
    # Database Errors
    DatabaseError,
    ConnectionPoolError,
    TransactionError,

    # Authentication Errors
    AuthenticationError,

    # Authorization Errors
    AuthorizationError,
    PermissionDeniedError,

    # Not Found Errors
    ResourceNotFoundError,
    InventoryNotFoundError,
    UserNotFoundError,
    ShareNotFoundError,
    GrantNotFoundError,

    # Conflict Errors
    ConflictError,
    DuplicateShareError,
    DuplicateGrantError,
    SelfShareError,
    SelfGrantError,
    SameOwnerTransferError,

    # Validation Errors
    ValidationError,
    MissingFieldError,
    InvalidPermissionLevelError,
    InactiveUserError,
)

from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "InventoryAccessError",
    "get_http_status_code",
    "HTTP_STATUS_MAP",
    "DatabaseError",
    "ConnectionPoolError",
    "TransactionError",
    "AuthenticationError",
    "AuthorizationError",
    "PermissionDeniedError",
    "ResourceNotFoundError",
    "InventoryNotFoundError",
    "UserNotFoundError",
    "ShareNotFoundError",
    "GrantNotFoundError",
    "ConflictError",
    "DuplicateShareError",
    "DuplicateGrantError",
    "SelfShareError",
    "SelfGrantError",
    "SameOwnerTransferError",
    "ValidationError",
    "MissingFieldError",
    "InvalidPermissionLevelError",
    "InactiveUserError",
]

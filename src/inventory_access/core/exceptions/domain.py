"""Domain-specific exceptions for inventory-access.

Grouped by the error taxonomy the access-control core exposes:
Unauthorized, Forbidden, NotFound, Conflict and ValidationError, plus the
infrastructure errors raised by the database layer.
"""

from typing import Any, Dict, Optional

from .base import InventoryAccessError


# Database Errors
class DatabaseError(InventoryAccessError):
    """Base class for database-related errors."""
    pass


class ConnectionPoolError(DatabaseError):
    """Raised when the connection pool cannot be created or used."""
    pass


class TransactionError(DatabaseError):
    """Raised when a database transaction fails."""
    pass


# Authentication Errors (Unauthorized)
class AuthenticationError(InventoryAccessError):
    """Raised when no valid acting-user context is available."""
    pass


# Authorization Errors (Forbidden)
class AuthorizationError(InventoryAccessError):
    """Base class for authorization-related errors."""
    pass


class PermissionDeniedError(AuthorizationError):
    """Raised when the resolved permission level is insufficient."""

    def __init__(
        self,
        message: str,
        required_level: Optional[str] = None,
        actual_level: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if required_level is not None:
            details["required_level"] = required_level
        if actual_level is not None:
            details["actual_level"] = actual_level
        super().__init__(message, details=details)
        self.required_level = required_level
        self.actual_level = actual_level


# Not Found Errors
class ResourceNotFoundError(InventoryAccessError):
    """Raised when a referenced resource does not exist."""

    def __init__(self, resource_type: str, identifier: Any):
        self.resource_type = resource_type
        self.identifier = str(identifier)
        super().__init__(
            f"{resource_type} '{identifier}' not found",
            details={"resource_type": resource_type, "identifier": str(identifier)},
        )


class InventoryNotFoundError(ResourceNotFoundError):
    def __init__(self, identifier: Any):
        super().__init__("Inventory", identifier)


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, identifier: Any):
        super().__init__("User", identifier)


class ShareNotFoundError(ResourceNotFoundError):
    def __init__(self, identifier: Any):
        super().__init__("Share", identifier)


class GrantNotFoundError(ResourceNotFoundError):
    def __init__(self, identifier: Any):
        super().__init__("Access grant", identifier)


# Conflict Errors
class ConflictError(InventoryAccessError):
    """Raised when an operation conflicts with existing data."""
    pass


class DuplicateShareError(ConflictError):
    """Raised when the inventory is already shared with the user."""
    pass


class DuplicateGrantError(ConflictError):
    """Raised when the grantor already granted all access to the grantee."""
    pass


class SelfShareError(ConflictError):
    """Raised when an owner tries to share an inventory with themselves."""
    pass


class SelfGrantError(ConflictError):
    """Raised when a user tries to grant all access to themselves."""
    pass


class SameOwnerTransferError(ConflictError):
    """Raised when ownership is transferred to the current owner."""
    pass


# Validation Errors
class ValidationError(InventoryAccessError):
    """Raised when input validation fails."""
    pass


class MissingFieldError(ValidationError):
    """Raised when a required field is missing or blank."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"{field_name} is required", details={"field": field_name})


class InvalidPermissionLevelError(ValidationError):
    """Raised when a permission level is unknown or not storable on a share."""

    def __init__(self, value: Any, allowed: Optional[list] = None):
        self.value = value
        details: Dict[str, Any] = {"value": str(value)}
        if allowed:
            details["allowed"] = allowed
        super().__init__(f"Invalid permission level: {value}", details=details)


class InactiveUserError(ValidationError):
    """Raised when the target of an ownership transfer is deactivated."""
    pass

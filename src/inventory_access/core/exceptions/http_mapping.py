"""HTTP status code mapping for exceptions.

Exact class matches win; otherwise the exception's MRO is walked so that
subclasses inherit the status of their nearest mapped ancestor.
"""

from typing import Dict, Type

from .base import InventoryAccessError
from .domain import *


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 401 Unauthorized
    AuthenticationError: 401,

    # 403 Forbidden
    AuthorizationError: 403,
    PermissionDeniedError: 403,

    # 404 Not Found
    ResourceNotFoundError: 404,
    InventoryNotFoundError: 404,
    UserNotFoundError: 404,
    ShareNotFoundError: 404,
    GrantNotFoundError: 404,

    # 409 Conflict
    ConflictError: 409,
    DuplicateShareError: 409,
    DuplicateGrantError: 409,
    SelfShareError: 409,
    SelfGrantError: 409,
    SameOwnerTransferError: 409,

    # 422 Unprocessable Entity
    ValidationError: 422,
    MissingFieldError: 422,
    InvalidPermissionLevelError: 422,
    InactiveUserError: 422,

    # 500 Internal Server Error
    DatabaseError: 500,
    ConnectionPoolError: 500,
    TransactionError: 500,

    # Default for InventoryAccessError
    InventoryAccessError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception instance.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code, 500 when nothing in the hierarchy is mapped
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
        if exception_type is Exception:
            break
    return 500

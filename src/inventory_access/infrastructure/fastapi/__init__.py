"""FastAPI integration: dependencies and exception handlers.

Router wiring lives in ``inventory_access.infrastructure.fastapi.setup``.
"""

from .dependencies import get_acting_user
from .error_handlers import (
    register_exception_handlers,
    inventory_access_exception_handler,
    create_error_response,
)

__all__ = [
    "get_acting_user",
    "register_exception_handlers",
    "inventory_access_exception_handler",
    "create_error_response",
]

"""Exception handlers mapping inventory-access errors to HTTP responses."""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ...core.exceptions import InventoryAccessError, PermissionDeniedError, get_http_status_code

logger = logging.getLogger(__name__)


def create_error_response(exc: InventoryAccessError, status_code: int) -> Dict[str, Any]:
    """Render the JSON error body.

    Forbidden responses also carry the required and actual permission levels
    at the top of the body, so clients can tell "needs owner" from "needs edit".
    """
    error: Dict[str, Any] = {
        "code": exc.error_code,
        "message": exc.message,
        "status": status_code,
        "type": exc.__class__.__name__,
        "details": exc.details,
    }
    if isinstance(exc, PermissionDeniedError):
        error["required_level"] = exc.required_level
        error["actual_level"] = exc.actual_level
    return {"error": error}


async def inventory_access_exception_handler(request: Request, exc: InventoryAccessError) -> JSONResponse:
    """Render any InventoryAccessError with its mapped status code."""
    status_code = get_http_status_code(exc)
    if status_code >= 500:
        logger.error(f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{status_code} {exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content=create_error_response(exc, status_code),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handler for the whole InventoryAccessError hierarchy."""
    app.add_exception_handler(InventoryAccessError, inventory_access_exception_handler)

"""Tests for the JSON error body."""

from inventory_access.core.exceptions import MissingFieldError, PermissionDeniedError
from inventory_access.infrastructure.fastapi.error_handlers import create_error_response


def test_validation_error_body():
    response = create_error_response(MissingFieldError("grantee_username"), 422)

    assert response == {
        "error": {
            "code": "MissingFieldError",
            "message": "grantee_username is required",
            "status": 422,
            "type": "MissingFieldError",
            "details": {"field": "grantee_username"},
        }
    }


def test_forbidden_body_names_the_levels():
    exc = PermissionDeniedError(
        "Insufficient permission to share this inventory",
        required_level="owner",
        actual_level="all_access",
        details={"inventory_id": "7"},
    )

    error = create_error_response(exc, 403)["error"]

    assert error["required_level"] == "owner"
    assert error["actual_level"] == "all_access"
    assert error["details"]["inventory_id"] == "7"

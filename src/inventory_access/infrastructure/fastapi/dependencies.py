"""Shared FastAPI dependencies.

The acting user comes from the host application's auth/session layer.
Hosts override ``get_acting_user`` through ``app.dependency_overrides`` or
pass their own dependency to ``setup_access_routers``.
"""

from ...core.exceptions import AuthenticationError
from ...features.users.entities import User


async def get_acting_user() -> User:
    """Placeholder for the authenticated user dependency.

    Without an override every protected route answers 401.
    """
    raise AuthenticationError("No authenticated user available for this request")

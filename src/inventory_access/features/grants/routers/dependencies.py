"""Grant router dependencies."""


def get_grant_service():
    """Placeholder for the grant service dependency."""
    raise NotImplementedError(
        "Services must provide their own grant service dependency"
    )

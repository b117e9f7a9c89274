"""Transfer router dependencies."""


def get_transfer_service():
    """Placeholder for the ownership transfer service dependency."""
    raise NotImplementedError(
        "Services must provide their own ownership transfer service dependency"
    )

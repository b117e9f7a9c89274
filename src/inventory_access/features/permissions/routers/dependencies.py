"""Permission router dependencies.

Placeholders that host services override with configured instances.
"""


def get_permission_resolver():
    """Placeholder for the permission resolver dependency."""
    raise NotImplementedError(
        "Services must provide their own permission resolver dependency"
    )


def get_accessible_inventory_service():
    """Placeholder for the accessible inventory service dependency."""
    raise NotImplementedError(
        "Services must provide their own accessible inventory service dependency"
    )

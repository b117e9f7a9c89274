"""Share router dependencies."""


def get_share_service():
    """Placeholder for the share service dependency.

    Services should override this to provide a configured ShareService.
    """
    raise NotImplementedError(
        "Services must provide their own share service dependency"
    )

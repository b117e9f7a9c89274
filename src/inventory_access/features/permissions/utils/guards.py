"""Guards turning an insufficient level into a Forbidden error."""

import logging
from typing import Optional

from ....core.exceptions import PermissionDeniedError
from ....core.value_objects import PermissionLevel

logger = logging.getLogger(__name__)


def require_level(
    level: PermissionLevel,
    minimum: PermissionLevel,
    action: str,
    inventory_id: Optional[object] = None,
) -> None:
    """Raise PermissionDeniedError unless ``level`` reaches ``minimum``.

    Args:
        level: The resolved level of the acting user
        minimum: The lowest level allowed to perform ``action``
        action: Human readable action, used in the error message
        inventory_id: Optional inventory id, added to the error details
    """
    if level >= minimum:
        return

    details = {"action": action}
    if inventory_id is not None:
        details["inventory_id"] = str(inventory_id)
    logger.warning(
        f"Denied '{action}' on inventory {inventory_id}: "
        f"required {minimum.value}, actual {level.value}"
    )
    raise PermissionDeniedError(
        f"Insufficient permission to {action}",
        required_level=minimum.value,
        actual_level=level.value,
        details=details,
    )


def require_owner(level: PermissionLevel, action: str, inventory_id: Optional[object] = None) -> None:
    """Shorthand for actions only the inventory owner may perform."""
    require_level(level, PermissionLevel.OWNER, action, inventory_id=inventory_id)

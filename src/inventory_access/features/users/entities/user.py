"""User domain entity.

Users are owned by the external identity system; the access-control core
only reads them.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from ....core.value_objects import UserId


@dataclass(frozen=True)
class User:
    """An authenticated or looked-up user.

    ``is_admin`` is platform-wide and grants nothing on inventories unless
    the admin bypass policy is switched on.
    """

    id: UserId
    username: str
    is_admin: bool = False
    is_active: bool = True

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "User":
        return cls(
            id=UserId(record["id"]),
            username=record["username"],
            is_admin=bool(record.get("is_admin", False)),
            is_active=bool(record.get("is_active", True)),
        )

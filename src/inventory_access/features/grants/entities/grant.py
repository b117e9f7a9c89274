"""All-access grant entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ....core.value_objects import GrantId, UserId


@dataclass(frozen=True)
class AllAccessGrant:
    """Blanket grant from a grantor to a grantee.

    Covers every inventory the grantor owns now or later. Never scoped to
    a single inventory, so ownership transfers leave grant rows alone.
    """

    id: GrantId
    grantor_user_id: UserId
    grantee_user_id: UserId
    created_at: datetime
    updated_at: datetime
    grantor_username: Optional[str] = None
    grantee_username: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "AllAccessGrant":
        return cls(
            id=GrantId(record["id"]),
            grantor_user_id=UserId(record["grantor_user_id"]),
            grantee_user_id=UserId(record["grantee_user_id"]),
            created_at=record["created_at"],
            updated_at=record["updated_at"],
            grantor_username=record.get("grantor_username"),
            grantee_username=record.get("grantee_username"),
        )

"""Grant response models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..entities.grant import AllAccessGrant


class GrantResponse(BaseModel):
    """All-access grant as returned by the API."""

    id: str = Field(..., description="Grant ID")
    grantor_user_id: str = Field(..., description="User granting access")
    grantor_username: Optional[str] = Field(None, description="Username of the grantor")
    grantee_user_id: str = Field(..., description="User receiving access")
    grantee_username: Optional[str] = Field(None, description="Username of the grantee")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_entity(cls, grant: AllAccessGrant) -> "GrantResponse":
        return cls(
            id=str(grant.id),
            grantor_user_id=str(grant.grantor_user_id),
            grantor_username=grant.grantor_username,
            grantee_user_id=str(grant.grantee_user_id),
            grantee_username=grant.grantee_username,
            created_at=grant.created_at,
            updated_at=grant.updated_at,
        )

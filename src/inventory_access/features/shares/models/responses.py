"""Share response models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..entities.share import InventoryShare


class ShareResponse(BaseModel):
    """Inventory share as returned by the API."""

    id: str = Field(..., description="Share ID")
    inventory_id: int = Field(..., description="Shared inventory ID")
    shared_with_user_id: str = Field(..., description="User receiving access")
    shared_with_username: Optional[str] = Field(None, description="Username receiving access")
    shared_by_user_id: str = Field(..., description="Owner who created the share")
    shared_by_username: Optional[str] = Field(None, description="Username of the owner")
    permission_level: str = Field(..., description="Stored permission level")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_entity(cls, share: InventoryShare) -> "ShareResponse":
        return cls(
            id=str(share.id),
            inventory_id=share.inventory_id.value,
            shared_with_user_id=str(share.shared_with_user_id),
            shared_with_username=share.shared_with_username,
            shared_by_user_id=str(share.shared_by_user_id),
            shared_by_username=share.shared_by_username,
            permission_level=share.permission_level.value,
            created_at=share.created_at,
            updated_at=share.updated_at,
        )

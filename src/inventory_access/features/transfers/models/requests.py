"""Transfer request models."""

from pydantic import BaseModel, Field


class TransferOwnershipRequest(BaseModel):
    new_owner_username: str = Field(..., description="Username of the new owner")

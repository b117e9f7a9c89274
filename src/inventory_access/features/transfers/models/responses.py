"""Transfer response models."""

from pydantic import BaseModel, Field

from ..entities.transfer import TransferResult


class NewOwnerResponse(BaseModel):
    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")


class TransferResponse(BaseModel):
    """Outcome of an ownership transfer."""

    inventory_id: int = Field(..., description="Transferred inventory ID")
    previous_owner_id: str = Field(..., description="Owner before the transfer")
    new_owner: NewOwnerResponse = Field(..., description="Owner after the transfer")
    items_transferred: int = Field(..., description="Items whose owner was rewritten")
    shares_removed: int = Field(..., description="Shares deleted by the transfer")

    @classmethod
    def from_entity(cls, result: TransferResult) -> "TransferResponse":
        return cls(
            inventory_id=result.inventory_id.value,
            previous_owner_id=str(result.previous_owner_id),
            new_owner=NewOwnerResponse(id=str(result.new_owner.id), username=result.new_owner.username),
            items_transferred=result.items_transferred,
            shares_removed=result.shares_removed,
        )

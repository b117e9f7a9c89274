"""Ownership transfer router."""

from fastapi import APIRouter, Depends, Path

from ....infrastructure.fastapi.dependencies import get_acting_user
from ...permissions.routers.permissions_router import parse_inventory_id
from ...users.entities import User
from ..models.requests import TransferOwnershipRequest
from ..models.responses import TransferResponse
from ..services.ownership_transfer_service import OwnershipTransferService
from .dependencies import get_transfer_service


router = APIRouter(
    prefix="/inventories",
    tags=["Ownership Transfer"],
)


@router.post(
    "/{inventory_id}/transfer",
    response_model=TransferResponse,
    summary="Transfer ownership",
    description=(
        "Hand the inventory and all its items to another user. Every share on "
        "the inventory is removed and the previous owner loses access. Irreversible."
    ),
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Only the owner may transfer"},
        404: {"description": "Inventory or user not found"},
        409: {"description": "User already owns the inventory"},
        422: {"description": "Missing username or inactive user"},
    }
)
async def transfer_ownership(
    request: TransferOwnershipRequest,
    inventory_id: int = Path(..., description="Inventory ID"),
    acting_user: User = Depends(get_acting_user),
    service: OwnershipTransferService = Depends(get_transfer_service)
) -> TransferResponse:
    result = await service.transfer_ownership(
        acting_user,
        parse_inventory_id(inventory_id),
        request.new_owner_username,
    )
    return TransferResponse.from_entity(result)

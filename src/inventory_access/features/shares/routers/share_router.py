"""Share router.

Owner-only management of inventory shares plus the acting user's own
given/received lists. Domain errors propagate to the registered handlers.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status

from ....core.value_objects import ShareId
from ....infrastructure.fastapi.dependencies import get_acting_user
from ...permissions.routers.permissions_router import parse_inventory_id
from ...users.entities import User
from ..models.requests import CreateShareRequest, UpdateShareRequest
from ..models.responses import ShareResponse
from ..services.share_service import ShareService
from .dependencies import get_share_service


router = APIRouter(
    tags=["Inventory Shares"],
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Only the inventory owner may manage shares"},
        404: {"description": "Inventory, user or share not found"},
        422: {"description": "Validation error"},
    }
)


@router.get(
    "/inventories/{inventory_id}/shares",
    response_model=List[ShareResponse],
    summary="List inventory shares",
    description="Owner-only view of everyone an inventory is shared with",
)
async def list_inventory_shares(
    inventory_id: int = Path(..., description="Inventory ID"),
    acting_user: User = Depends(get_acting_user),
    service: ShareService = Depends(get_share_service)
) -> List[ShareResponse]:
    shares = await service.list_inventory_shares(acting_user, parse_inventory_id(inventory_id))
    return [ShareResponse.from_entity(share) for share in shares]


@router.post(
    "/inventories/{inventory_id}/shares",
    response_model=ShareResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Share inventory",
    responses={
        201: {"description": "Share created"},
        409: {"description": "Already shared, or sharing with the owner"},
    }
)
async def create_share(
    request: CreateShareRequest,
    inventory_id: int = Path(..., description="Inventory ID"),
    acting_user: User = Depends(get_acting_user),
    service: ShareService = Depends(get_share_service)
) -> ShareResponse:
    share = await service.create_share(
        acting_user,
        parse_inventory_id(inventory_id),
        request.shared_with_username,
        request.permission_level,
    )
    return ShareResponse.from_entity(share)


# Static paths are registered before /shares/{share_id}
@router.get(
    "/shares/given",
    response_model=List[ShareResponse],
    summary="List shares given",
)
async def list_shares_given(
    acting_user: User = Depends(get_acting_user),
    service: ShareService = Depends(get_share_service)
) -> List[ShareResponse]:
    shares = await service.list_shares_given(acting_user)
    return [ShareResponse.from_entity(share) for share in shares]


@router.get(
    "/shares/received",
    response_model=List[ShareResponse],
    summary="List shares received",
)
async def list_shares_received(
    acting_user: User = Depends(get_acting_user),
    service: ShareService = Depends(get_share_service)
) -> List[ShareResponse]:
    shares = await service.list_shares_received(acting_user)
    return [ShareResponse.from_entity(share) for share in shares]


@router.put(
    "/shares/{share_id}",
    response_model=ShareResponse,
    summary="Update share level",
)
async def update_share(
    request: UpdateShareRequest,
    share_id: UUID = Path(..., description="Share ID"),
    acting_user: User = Depends(get_acting_user),
    service: ShareService = Depends(get_share_service)
) -> ShareResponse:
    share = await service.update_share(acting_user, ShareId(share_id), request.permission_level)
    return ShareResponse.from_entity(share)


@router.delete(
    "/shares/{share_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete share",
)
async def delete_share(
    share_id: UUID = Path(..., description="Share ID"),
    acting_user: User = Depends(get_acting_user),
    service: ShareService = Depends(get_share_service)
) -> Response:
    await service.delete_share(acting_user, ShareId(share_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Permission router: effective permissions and accessible inventories."""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ....core.value_objects import InventoryId
from ....infrastructure.fastapi.dependencies import get_acting_user
from ...users.entities import User
from ..models.responses import (
    EffectivePermissionsResponse,
    AccessibleInventoryResponse,
    AccessibleInventoryListResponse,
)
from ..services import PermissionResolver, AccessibleInventoryService
from .dependencies import get_permission_resolver, get_accessible_inventory_service


router = APIRouter(
    prefix="/inventories",
    tags=["Inventory Permissions"],
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Inventory not found"},
    }
)


def parse_inventory_id(raw: int) -> InventoryId:
    try:
        return InventoryId(raw)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid inventory ID: {str(e)}"
        )


@router.get(
    "/accessible",
    response_model=AccessibleInventoryListResponse,
    summary="List accessible inventories",
    description="Inventories the acting user owns, is shared on, or reaches through an all-access grant",
)
async def list_accessible_inventories(
    acting_user: User = Depends(get_acting_user),
    service: AccessibleInventoryService = Depends(get_accessible_inventory_service)
) -> AccessibleInventoryListResponse:
    entries = await service.list_accessible(acting_user)
    return AccessibleInventoryListResponse(
        inventories=[AccessibleInventoryResponse.from_entity(entry) for entry in entries],
        total=len(entries),
    )


@router.get(
    "/{inventory_id}/permissions",
    response_model=EffectivePermissionsResponse,
    summary="Get effective permissions",
    description="Resolve the acting user's permission level on an inventory and its capability flags",
)
async def get_effective_permissions(
    inventory_id: int = Path(..., description="Inventory ID"),
    acting_user: User = Depends(get_acting_user),
    resolver: PermissionResolver = Depends(get_permission_resolver)
) -> EffectivePermissionsResponse:
    permissions = await resolver.effective_permissions(acting_user, parse_inventory_id(inventory_id))
    return EffectivePermissionsResponse.from_entity(permissions)

"""All-access grant router."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status

from ....core.value_objects import GrantId
from ....infrastructure.fastapi.dependencies import get_acting_user
from ...users.entities import User
from ..models.requests import CreateGrantRequest
from ..models.responses import GrantResponse
from ..services.grant_service import GrantService
from .dependencies import get_grant_service


router = APIRouter(
    prefix="/access-grants",
    tags=["All-Access Grants"],
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "User or grant not found"},
    }
)


@router.get(
    "",
    response_model=List[GrantResponse],
    summary="List grants given",
    description="All-access grants the acting user has given to others",
)
async def list_grants_given(
    acting_user: User = Depends(get_acting_user),
    service: GrantService = Depends(get_grant_service)
) -> List[GrantResponse]:
    grants = await service.list_grants_given(acting_user)
    return [GrantResponse.from_entity(grant) for grant in grants]


@router.get(
    "/received",
    response_model=List[GrantResponse],
    summary="List grants received",
)
async def list_grants_received(
    acting_user: User = Depends(get_acting_user),
    service: GrantService = Depends(get_grant_service)
) -> List[GrantResponse]:
    grants = await service.list_grants_received(acting_user)
    return [GrantResponse.from_entity(grant) for grant in grants]


@router.post(
    "",
    response_model=GrantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Grant all access",
    description="Give another user all access to every inventory you own, now and later",
    responses={
        201: {"description": "Grant created"},
        409: {"description": "Self-grant or duplicate grant"},
    }
)
async def create_grant(
    request: CreateGrantRequest,
    acting_user: User = Depends(get_acting_user),
    service: GrantService = Depends(get_grant_service)
) -> GrantResponse:
    grant = await service.create_grant(acting_user, request.grantee_username)
    return GrantResponse.from_entity(grant)


@router.delete(
    "/{grant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Revoke grant",
    responses={403: {"description": "Only the grantor may revoke"}},
)
async def revoke_grant(
    grant_id: UUID = Path(..., description="Grant ID"),
    acting_user: User = Depends(get_acting_user),
    service: GrantService = Depends(get_grant_service)
) -> Response:
    await service.revoke_grant(acting_user, GrantId(grant_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Wiring of the access-control routers into a host FastAPI application."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import FastAPI

from ...config.settings import AccessControlSettings, get_settings
from ...features.grants.repositories import AsyncPGGrantRepository
from ...features.grants.routers import grant_router, get_grant_service
from ...features.grants.services import GrantService
from ...features.inventories.repositories import AsyncPGInventoryStore
from ...features.permissions.entities import AccessPolicy
from ...features.permissions.routers import (
    permissions_router,
    get_permission_resolver,
    get_accessible_inventory_service,
)
from ...features.permissions.services import PermissionResolver, AccessibleInventoryService
from ...features.shares.repositories import AsyncPGShareRepository
from ...features.shares.routers import share_router, get_share_service
from ...features.shares.services import ShareService
from ...features.transfers.routers import transfer_router, get_transfer_service
from ...features.transfers.services import OwnershipTransferService
from ...features.users.repositories import AsyncPGUserDirectory
from .dependencies import get_acting_user
from .error_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


@dataclass
class AccessControlServices:
    """Configured services backing the routers."""

    resolver: PermissionResolver
    accessible_inventories: AccessibleInventoryService
    shares: ShareService
    grants: GrantService
    transfers: OwnershipTransferService


def create_access_services(
    database_service,
    settings: Optional[AccessControlSettings] = None,
) -> AccessControlServices:
    """Build every service on top of the asyncpg repositories."""
    settings = settings or get_settings()

    user_directory = AsyncPGUserDirectory(database_service)
    inventory_store = AsyncPGInventoryStore(database_service)
    share_repository = AsyncPGShareRepository(database_service)
    grant_repository = AsyncPGGrantRepository(database_service)

    resolver = PermissionResolver(
        inventory_store,
        share_repository,
        grant_repository,
        policy=AccessPolicy.from_settings(settings),
    )
    return AccessControlServices(
        resolver=resolver,
        accessible_inventories=AccessibleInventoryService(inventory_store, resolver),
        shares=ShareService(database_service, inventory_store, share_repository, user_directory, resolver),
        grants=GrantService(grant_repository, user_directory),
        transfers=OwnershipTransferService(
            database_service, inventory_store, share_repository, user_directory, resolver
        ),
    )


def setup_access_routers(
    app: FastAPI,
    services: AccessControlServices,
    acting_user_dependency: Optional[Callable] = None,
    prefix: Optional[str] = None,
) -> None:
    """Override the placeholder dependencies and include every router.

    Args:
        app: Host application
        services: Configured services, usually from ``create_access_services``
        acting_user_dependency: Host dependency returning the authenticated User
        prefix: Route prefix, defaults to the ``api_prefix`` setting
    """
    if prefix is None:
        prefix = get_settings().api_prefix

    app.dependency_overrides.update({
        get_permission_resolver: lambda: services.resolver,
        get_accessible_inventory_service: lambda: services.accessible_inventories,
        get_share_service: lambda: services.shares,
        get_grant_service: lambda: services.grants,
        get_transfer_service: lambda: services.transfers,
    })
    if acting_user_dependency is not None:
        app.dependency_overrides[get_acting_user] = acting_user_dependency

    register_exception_handlers(app)

    app.include_router(permissions_router, prefix=prefix)
    app.include_router(share_router, prefix=prefix)
    app.include_router(grant_router, prefix=prefix)
    app.include_router(transfer_router, prefix=prefix)

    logger.info(f"Inventory access routers mounted at {prefix or '/'}")

"""Pytest configuration and fixtures for inventory-access tests."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest

from inventory_access.features.grants.services import GrantService
from inventory_access.features.permissions.entities import AccessPolicy
from inventory_access.features.permissions.services import PermissionResolver, AccessibleInventoryService
from inventory_access.features.shares.services import ShareService
from inventory_access.features.transfers.services import OwnershipTransferService

from .fakes import (
    FakeDatabaseService,
    InMemoryGrantRepository,
    InMemoryInventoryStore,
    InMemoryShareRepository,
    InMemoryStore,
    InMemoryUserDirectory,
)


@pytest.fixture
def mock_connection():
    """Mock asyncpg connection for repository tests."""
    conn = AsyncMock()
    conn.fetchrow = AsyncMock(return_value=None)
    conn.fetch = AsyncMock(return_value=[])
    conn.fetchval = AsyncMock(return_value=None)
    conn.execute = AsyncMock(return_value="UPDATE 0")
    return conn


@pytest.fixture
def mock_database_service(mock_connection):
    """Database service whose connection scopes hand out ``mock_connection``."""
    service = MagicMock()

    @asynccontextmanager
    async def use_connection(conn=None):
        yield conn if conn is not None else mock_connection

    service.use_connection = use_connection
    return service


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def alice(store):
    return store.add_user("alice")


@pytest.fixture
def bob(store):
    return store.add_user("bob")


@pytest.fixture
def carol(store):
    return store.add_user("carol")


@pytest.fixture
def dave(store):
    return store.add_user("dave")


@pytest.fixture
def inventory(store, alice):
    """Alice's inventory holding three items."""
    return store.add_inventory(alice, name="Garage", items=3)


@pytest.fixture
def database_service(store):
    return FakeDatabaseService(store)


@pytest.fixture
def user_directory(store):
    return InMemoryUserDirectory(store)


@pytest.fixture
def inventory_store(store):
    return InMemoryInventoryStore(store)


@pytest.fixture
def share_repository(store):
    return InMemoryShareRepository(store)


@pytest.fixture
def grant_repository(store):
    return InMemoryGrantRepository(store)


@pytest.fixture
def resolver(inventory_store, share_repository, grant_repository):
    return PermissionResolver(inventory_store, share_repository, grant_repository)


@pytest.fixture
def admin_bypass_resolver(inventory_store, share_repository, grant_repository):
    return PermissionResolver(
        inventory_store,
        share_repository,
        grant_repository,
        policy=AccessPolicy(admin_bypass_enabled=True),
    )


@pytest.fixture
def share_service(database_service, inventory_store, share_repository, user_directory, resolver):
    return ShareService(database_service, inventory_store, share_repository, user_directory, resolver)


@pytest.fixture
def grant_service(grant_repository, user_directory):
    return GrantService(grant_repository, user_directory)


@pytest.fixture
def transfer_service(database_service, inventory_store, share_repository, user_directory, resolver):
    return OwnershipTransferService(
        database_service, inventory_store, share_repository, user_directory, resolver
    )


@pytest.fixture
def accessible_service(inventory_store, resolver):
    return AccessibleInventoryService(inventory_store, resolver)

"""Tests for the database service, settings and error handling."""

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import asyncpg
import pytest
from pydantic import ValidationError as PydanticValidationError

from inventory_access.core.exceptions import (
    ConnectionPoolError,
    DatabaseError,
    TransactionError,
    UserNotFoundError,
)
from inventory_access.features.database import (
    DatabaseService,
    DatabaseSettings,
    affected_rows,
    database_error_handler,
)

CREATE_POOL = "inventory_access.features.database.services.database_service.asyncpg.create_pool"


def _mock_pool():
    conn = MagicMock()
    conn.transaction.return_value.__aenter__.return_value = None
    conn.transaction.return_value.__aexit__.return_value = False
    pool = MagicMock()
    pool.acquire = AsyncMock(return_value=conn)
    pool.release = AsyncMock()
    pool.close = AsyncMock()
    return pool, conn


class TestDatabaseSettings:

    def test_pool_max_must_cover_min(self):
        with pytest.raises(PydanticValidationError):
            DatabaseSettings(pool_min_size=10, pool_max_size=5)

    def test_asyncpg_kwargs_from_fields(self):
        settings = DatabaseSettings(host="db", port=6543, database="inv", username="u", password="p")

        kwargs = settings.to_asyncpg_kwargs()

        assert kwargs["host"] == "db"
        assert kwargs["port"] == 6543
        assert kwargs["user"] == "u"
        assert kwargs["password"] == "p"
        assert "dsn" not in kwargs
        assert settings.safe_dsn == "db:6543/inv"

    def test_dsn_wins(self):
        settings = DatabaseSettings(dsn="postgresql://u:secret@db:5432/inv")

        kwargs = settings.to_asyncpg_kwargs()

        assert kwargs["dsn"] == "postgresql://u:secret@db:5432/inv"
        assert "host" not in kwargs
        assert "secret" not in settings.safe_dsn

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("INVENTORY_ACCESS_DB_POOL_MAX_SIZE", "42")
        assert DatabaseSettings().pool_max_size == 42


class TestDatabaseService:

    @pytest.mark.asyncio
    async def test_connection_is_released(self):
        pool, conn = _mock_pool()
        with patch(CREATE_POOL, new=AsyncMock(return_value=pool)) as create_pool:
            service = DatabaseService(DatabaseSettings())
            async with service.get_connection() as acquired:
                assert acquired is conn
            async with service.get_connection():
                pass

        create_pool.assert_awaited_once()
        assert pool.release.await_count == 2

    @pytest.mark.asyncio
    async def test_transaction_wraps_block(self):
        pool, conn = _mock_pool()
        with patch(CREATE_POOL, new=AsyncMock(return_value=pool)):
            service = DatabaseService(DatabaseSettings())
            async with service.transaction() as tx_conn:
                assert tx_conn is conn

        conn.transaction.assert_called_once()
        conn.transaction.return_value.__aexit__.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_domain_errors_propagate_from_transaction(self):
        pool, _ = _mock_pool()
        with patch(CREATE_POOL, new=AsyncMock(return_value=pool)):
            service = DatabaseService(DatabaseSettings())
            with pytest.raises(UserNotFoundError):
                async with service.transaction():
                    raise UserNotFoundError("ghost")
        pool.release.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_postgres_errors_become_transaction_error(self):
        pool, _ = _mock_pool()
        with patch(CREATE_POOL, new=AsyncMock(return_value=pool)):
            service = DatabaseService(DatabaseSettings())
            with pytest.raises(TransactionError):
                async with service.transaction():
                    raise asyncpg.PostgresError("could not serialize access")

    @pytest.mark.asyncio
    async def test_use_connection_reuses_given_connection(self):
        pool, _ = _mock_pool()
        given = object()
        with patch(CREATE_POOL, new=AsyncMock(return_value=pool)):
            service = DatabaseService(DatabaseSettings())
            async with service.use_connection(given) as conn:
                assert conn is given

        pool.acquire.assert_not_called()

    @pytest.mark.asyncio
    async def test_pool_creation_failure(self, mocker):
        mocker.patch(CREATE_POOL, new=AsyncMock(side_effect=OSError("connection refused")))

        service = DatabaseService(DatabaseSettings())
        with pytest.raises(ConnectionPoolError):
            await service.initialize()

    @pytest.mark.asyncio
    async def test_closed_service_refuses_connections(self):
        pool, _ = _mock_pool()
        with patch(CREATE_POOL, new=AsyncMock(return_value=pool)):
            service = DatabaseService(DatabaseSettings())
            await service.initialize()
            await service.close()

            pool.close.assert_awaited_once()
            with pytest.raises(ConnectionPoolError):
                async with service.get_connection():
                    pass


class TestErrorHandling:

    @pytest.mark.asyncio
    async def test_wraps_store_errors(self, caplog):
        @database_error_handler("load things")
        async def failing():
            raise asyncpg.PostgresError("boom")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(DatabaseError) as exc_info:
                await failing()

        assert exc_info.value.details["operation"] == "load things"
        assert "Failed to load things" in caplog.text

    @pytest.mark.asyncio
    async def test_domain_errors_pass_through(self):
        @database_error_handler("load things")
        async def failing():
            raise UserNotFoundError("ghost")

        with pytest.raises(UserNotFoundError):
            await failing()

    @pytest.mark.parametrize("status, expected", [
        ("UPDATE 3", 3),
        ("DELETE 0", 0),
        ("INSERT 0 1", 1),
        ("", 0),
        (None, 0),
    ])
    def test_affected_rows(self, status, expected):
        assert affected_rows(status) == expected

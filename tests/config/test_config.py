"""Tests for settings and logging configuration."""

import pytest

from inventory_access.config import AccessControlSettings, LoggingConfig
from inventory_access.features.permissions.entities import AccessPolicy


class TestAccessControlSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("INVENTORY_ACCESS_ADMIN_BYPASS_ENABLED", raising=False)
        settings = AccessControlSettings()

        assert settings.admin_bypass_enabled is False
        assert settings.api_prefix == "/api/v1"
        assert not settings.is_production

    def test_env_toggles_admin_bypass(self, monkeypatch):
        monkeypatch.setenv("INVENTORY_ACCESS_ADMIN_BYPASS_ENABLED", "true")

        settings = AccessControlSettings()

        assert settings.admin_bypass_enabled is True
        assert AccessPolicy.from_settings(settings).admin_bypass_enabled is True


class TestLoggingConfig:

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_VERBOSITY", "LOG_FORMAT", "ENABLE_SQL_LOGGING"):
            monkeypatch.delenv(name, raising=False)

    def test_normal_verbosity(self):
        config = LoggingConfig.build_config()

        assert config["root"]["level"] == "INFO"
        assert config["loggers"]["asyncpg"]["level"] == "WARNING"
        assert config["loggers"]["httpx"]["level"] == "ERROR"
        assert config["loggers"]["inventory_access.features.database"]["level"] == "WARNING"

    def test_quiet_verbosity(self, monkeypatch):
        monkeypatch.setenv("LOG_VERBOSITY", "quiet")
        assert LoggingConfig.build_config()["root"]["level"] == "ERROR"

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = LoggingConfig.build_config()

        assert config["root"]["level"] == "DEBUG"
        assert config["loggers"]["inventory_access.features.database"]["level"] == "DEBUG"

    def test_json_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        fmt = LoggingConfig.build_config()["formatters"]["default"]["format"]
        assert fmt.startswith('{"time"')

    def test_sql_logging_keeps_asyncpg_unrestricted(self, monkeypatch):
        monkeypatch.setenv("ENABLE_SQL_LOGGING", "true")
        assert "asyncpg" not in LoggingConfig.build_config()["loggers"]

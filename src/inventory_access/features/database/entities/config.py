"""Database configuration for inventory-access."""

from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import Field, SecretStr, field_validator, ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Connection and pool settings for the PostgreSQL store."""

    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_ACCESS_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # A full DSN wins over the discrete fields below
    dsn: Optional[str] = Field(default=None, description="PostgreSQL DSN")

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="inventory", description="Database name")
    username: str = Field(default="postgres", description="Database username")
    password: SecretStr = Field(default=SecretStr("postgres"), description="Database password")

    # Connection pool settings
    pool_min_size: int = Field(default=2, ge=0, description="Minimum pool size")
    pool_max_size: int = Field(default=10, ge=1, description="Maximum pool size")
    pool_timeout_seconds: float = Field(default=30.0, gt=0, description="Connection acquire timeout")
    command_timeout_seconds: float = Field(default=60.0, gt=0, description="Per-statement timeout")

    @field_validator("pool_max_size")
    @classmethod
    def validate_pool_max_size(cls, v: int, info: ValidationInfo) -> int:
        """Ensure max pool size is greater than min pool size."""
        min_size = info.data.get("pool_min_size")
        if min_size is not None and v < min_size:
            raise ValueError("pool_max_size must be greater than or equal to pool_min_size")
        return v

    @property
    def safe_dsn(self) -> str:
        """DSN without password, for logging."""
        if self.dsn:
            return self.dsn.split("@")[-1]
        return f"{self.host}:{self.port}/{self.database}"

    def to_asyncpg_kwargs(self) -> Dict[str, Any]:
        """Convert to asyncpg.create_pool arguments."""
        kwargs: Dict[str, Any] = {
            "min_size": self.pool_min_size,
            "max_size": self.pool_max_size,
            "timeout": self.pool_timeout_seconds,
            "command_timeout": self.command_timeout_seconds,
        }
        if self.dsn:
            kwargs["dsn"] = self.dsn
        else:
            kwargs.update(
                host=self.host,
                port=self.port,
                database=self.database,
                user=self.username,
                password=self.password.get_secret_value(),
            )
        return kwargs


@lru_cache()
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings."""
    return DatabaseSettings()

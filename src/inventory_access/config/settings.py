"""Application settings for inventory-access.

Read from environment variables (and an optional .env file) through
pydantic-settings. Database settings live with the database feature.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AccessControlSettings(BaseSettings):
    """Settings for the access-control core."""

    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_ACCESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    app_name: str = Field(default="inventory-access", description="Service name used in logs")
    environment: str = Field(default="development", description="Deployment environment")

    # Policy toggles
    admin_bypass_enabled: bool = Field(
        default=False,
        description="Elevate platform admins to all_access on every inventory"
    )

    # HTTP surface
    api_prefix: str = Field(default="/api/v1", description="Prefix for the access-control routers")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


@lru_cache()
def get_settings() -> AccessControlSettings:
    """Get cached access-control settings."""
    return AccessControlSettings()

"""Access policy toggles."""

from dataclasses import dataclass
from typing import Optional

from ....config.settings import AccessControlSettings, get_settings


@dataclass(frozen=True)
class AccessPolicy:
    """Policy switches consulted by the resolver.

    With ``admin_bypass_enabled`` a platform admin resolves to at least
    ``all_access`` on every inventory. Admins never become owners, so they
    still cannot share or transfer someone else's inventory.
    """

    admin_bypass_enabled: bool = False

    @classmethod
    def from_settings(cls, settings: Optional[AccessControlSettings] = None) -> "AccessPolicy":
        settings = settings or get_settings()
        return cls(admin_bypass_enabled=settings.admin_bypass_enabled)

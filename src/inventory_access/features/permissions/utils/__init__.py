"""Permission utilities."""

from .guards import require_level, require_owner

__all__ = ["require_level", "require_owner"]

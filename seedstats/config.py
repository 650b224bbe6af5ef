#!/usr/bin/env python3
# ======================================================================
#  seedstats - Config (module-level accessors)
#  - Thin wrapper around a shared ConfigService instance
# ======================================================================

from __future__ import annotations

from typing import Any

from seedstats.services.config_svc import ConfigService

# Global service instance
_config_service = ConfigService()


def compose(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Load final configuration (defaults → YAML → overrides → SEEDSTATS_* env).

    Overrides bypass the cache and compose fresh.
    """
    if overrides:
        return _config_service._compose(overrides)
    return _config_service.get_config()


def get(key_path: str, default: Any = None) -> Any:
    """Convenience getter using dotted path, e.g. get("seed_storage_dir")."""
    return _config_service.get(key_path, default)

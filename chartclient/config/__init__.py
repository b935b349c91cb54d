"""
chartclient Configuration

Environment-driven settings.
"""

from __future__ import annotations

import os
from functools import lru_cache

from .schemas import ClientSettings


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() == "true"


@lru_cache()
def get_settings() -> ClientSettings:
    """
    Get client settings from environment.

    Uses lru_cache for singleton pattern; call `get_settings.cache_clear()`
    after changing the environment.
    """
    return ClientSettings(
        base_url=os.getenv("CHARTCLIENT_BASE_URL", "http://localhost:8088"),
        timeout=float(os.getenv("CHARTCLIENT_TIMEOUT", "30")),
        access_token=os.getenv("CHARTCLIENT_ACCESS_TOKEN"),
        csrf_token=os.getenv("CHARTCLIENT_CSRF_TOKEN"),
        log_requests=_env_flag("CHARTCLIENT_LOG_REQUESTS"),
        log_responses=_env_flag("CHARTCLIENT_LOG_RESPONSES"),
    )


__all__ = [
    "ClientSettings",
    "get_settings",
]

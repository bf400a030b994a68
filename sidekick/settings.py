"""Client configuration loaded from SIDE_* environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "http://localhost:8855/api/v1"


class SideSettings(BaseSettings):
    """Settings for talking to the local Side daemon.

    All fields are read from environment variables with the ``SIDE_`` prefix.
    For example, ``SIDE_BASE_URL=http://localhost:9000/api/v1`` maps to
    ``base_url``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SIDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "WARNING"

    # -- Daemon ----------------------------------------------------------------
    base_url: str = DEFAULT_BASE_URL
    """API root of the daemon; ``/workspaces/`` is appended for listing."""

    connect_timeout: float = 5.0
    """Seconds to wait for the TCP connection.  Reads use the transport default."""

    # -- Watch -----------------------------------------------------------------
    poll_interval: float = 5.0
    """Seconds between status checks in ``sidekick watch``."""


def get_settings() -> SideSettings:
    """Return a cached settings instance.

    Call ``_get_settings_cached.cache_clear()`` in tests to force a re-read
    after overriding env vars.
    """
    return _get_settings_cached()


@lru_cache(maxsize=1)
def _get_settings_cached() -> SideSettings:
    return SideSettings()

"""Runtime configuration for driverdiag."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class DiagnosticsSettings(BaseSettings):
    """Settings that shape the diagnostic block appended to failure messages."""

    host_lookup_timeout: float = Field(
        default=2.0,
        gt=0,
        le=30.0,
        description="Upper bound, in seconds, for resolving the local host name and address.",
    )
    build_revision: str = Field(
        default="unknown",
        description="Source revision reported in the build info line.",
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp reported in the build info line.",
    )
    support_base_url: str = Field(
        default="http://seleniumhq.org/exceptions/",
        description="Prefix for the documentation links of specialized failures.",
    )

    model_config = SettingsConfigDict(env_prefix="DRIVERDIAG_")


@lru_cache(maxsize=1)
def get_settings() -> DiagnosticsSettings:
    """Return the cached settings instance.

    Settings are read while failure messages are rendered, so invalid
    ``DRIVERDIAG_*`` values fall back to the defaults instead of raising.
    Tests can override values through the environment and then call
    ``get_settings.cache_clear()``.
    """
    try:
        return DiagnosticsSettings()
    except ValidationError as e:
        logger.debug("Invalid driverdiag settings, using defaults: %s", e)
        return DiagnosticsSettings.model_construct()


__all__ = ["DiagnosticsSettings", "get_settings"]

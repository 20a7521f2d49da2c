"""
Configuration - Settings read from constructor arguments or MASHERY_* env vars.
"""

import os
from dataclasses import dataclass
from typing import Optional, Mapping

from mashery_auth.adapters.mashery_oauth import DEFAULT_TOKEN_URL
from mashery_auth.core.record_store import AREA_PATH_PREFIX


@dataclass
class MasheryAuthConfig:
    """
    Runtime settings.

    Attributes:
        token_url: Mashery V3 token endpoint
        http_timeout: Upstream request timeout in seconds
        lease_seal_secret: When set, V3 lease internal data is sealed as a signed JWT
        storage_prefix: Key prefix of area records
        log_level: Level name for the package logger
    """
    token_url: str = DEFAULT_TOKEN_URL
    http_timeout: float = 10.0
    lease_seal_secret: Optional[str] = None
    storage_prefix: str = AREA_PATH_PREFIX
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MasheryAuthConfig":
        """
        Build settings from environment variables.

        Reads MASHERY_TOKEN_URL, MASHERY_HTTP_TIMEOUT,
        MASHERY_LEASE_SEAL_SECRET, MASHERY_STORAGE_PREFIX and
        MASHERY_LOG_LEVEL; unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        timeout_raw = env.get("MASHERY_HTTP_TIMEOUT")

        try:
            http_timeout = float(timeout_raw) if timeout_raw else cls.http_timeout
        except ValueError:
            raise ValueError(f"MASHERY_HTTP_TIMEOUT must be a number, got {timeout_raw!r}")

        return cls(
            token_url=env.get("MASHERY_TOKEN_URL", DEFAULT_TOKEN_URL),
            http_timeout=http_timeout,
            lease_seal_secret=env.get("MASHERY_LEASE_SEAL_SECRET") or None,
            storage_prefix=env.get("MASHERY_STORAGE_PREFIX", AREA_PATH_PREFIX),
            log_level=env.get("MASHERY_LOG_LEVEL", "INFO").upper(),
        )

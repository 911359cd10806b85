"""Mini README: Centralised configuration for pocketledger.

Structure:
    * PocketLedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``POCKETLEDGER_*`` environment variables or a local
    ``.env`` file. The sync layer reads the API location and timeout, the CLI
    reads the interface host and port, and logging reads the level.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class PocketLedgerSettings(BaseSettings):
    """Runtime configuration for the transaction client and reference API."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    api_base_url: str = Field(
        "http://127.0.0.1:5000/api/v1",
        description="Root URL of the transactions API; ``/transactions`` is appended.",
    )
    request_timeout_seconds: float = Field(
        10.0,
        description="Timeout applied to every request made by the sync layer.",
        gt=0,
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface the reference API binds to.",
    )
    interface_port: int = Field(
        5000,
        description="Port the reference API exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field("INFO", description="Root logging level name.")

    class Config:
        env_prefix = "POCKETLEDGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("api_base_url")
    def _strip_trailing_slash(cls, value: str) -> str:
        """Normalise the base URL so joined paths never double the slash."""

        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("api_base_url must be an http(s) URL")
        return value.rstrip("/")


@lru_cache()
def get_settings() -> PocketLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PocketLedgerSettings()

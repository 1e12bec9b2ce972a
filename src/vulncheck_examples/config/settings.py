from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the VULNCHECK_ prefix.
    For example:
        - VULNCHECK_API_TOKEN=vulncheck_xxx
        - VULNCHECK_HOST=api.vulncheck.com
        - VULNCHECK_TIMEOUT_SECONDS=30

    Alternatively, settings can be provided programmatically:
        with provide_client(AppConfig(api_token="vulncheck_xxx")) as client:
            ...
    """

    model_config = SettingsConfigDict(
        env_prefix="VULNCHECK_",
        case_sensitive=False,
        extra="forbid",
    )

    api_token: Optional[str] = Field(
        default=None,
        description="VulnCheck API token, sent as a bearer token on every request",
    )

    scheme: str = Field(
        default="https",
        pattern=r"^https?$",
        description="URL scheme used to reach the API",
    )

    host: str = Field(
        default="api.vulncheck.com",
        min_length=1,
        description="API host name (optionally with port)",
    )

    base_path: str = Field(
        default="/v3",
        description="Path prefix shared by every endpoint",
    )

    timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

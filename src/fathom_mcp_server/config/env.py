"""Environment configuration for the Fathom MCP Server.

Only the API key is required; everything else has a default.

```bash
export FATHOM_API_KEY="your-api-key"
export FATHOM_TIMEZONE="Europe/London"
export FATHOM_ENABLE_ELICITATION=false
```

These are rendered to the AppConfig class and can be accessed like this:

```python
from fathom_mcp_server.config import load_config
cfg = load_config()
print(cfg.api_base)
```

A missing API key is not rejected here: requests go out unauthenticated
and the upstream 401 is reported through the normal tool error path.
"""

from __future__ import annotations

from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE = "https://api.fathom.ai/external/v1"


class AppConfig(BaseSettings):
    """Application configuration settings loaded from environment variables.

    All environment variables are prefixed with FATHOM_ (e.g., FATHOM_API_KEY).
    """

    # ---- credentials / upstream ----
    api_key: Optional[SecretStr] = Field(
        default=None,
        description="Fathom API key sent as X-Api-Key on every upstream call",
    )
    api_base: str = Field(
        default=DEFAULT_API_BASE, description="Base URL of the Fathom external API"
    )

    # ---- network tuning ----
    summary_timeout_seconds: float = Field(
        default=15.0, gt=0, description="Time budget for a single summary fetch"
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Transport timeout for list and transcript requests",
    )

    # ---- behavior ----
    enable_elicitation: bool = Field(
        default=True,
        description="Append a prompt inviting a summary/transcript request to search results",
    )
    timezone: str = Field(
        default="UTC",
        description="IANA timezone used for date-range bounds and displayed times",
    )
    log_level: str = Field(default="INFO", description="Log level for stderr logs")

    # pydantic-settings v2 config
    model_config = SettingsConfigDict(
        env_prefix="FATHOM_",
        case_sensitive=False,
        env_file=(".env",),  # will read if present
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,  # make settings immutable
    )

    # ---- validators ----
    @field_validator("api_base", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("timezone", mode="after")
    @classmethod
    def _check_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()

    # ---- derived conveniences (no mutation) ----
    @property
    def tzinfo(self) -> ZoneInfo:
        """Timezone object for the configured `timezone`."""
        return ZoneInfo(self.timezone)

    @property
    def api_key_value(self) -> Optional[str]:
        """Plain API key, or None when not configured."""
        if self.api_key is None:
            return None
        return self.api_key.get_secret_value() or None


def load_config() -> AppConfig:
    """Load and validate application configuration from environment variables.

    • All variables are prefixed with FATHOM_ (e.g., FATHOM_API_KEY).
    • Missing values fall back to the documented defaults.
    """
    return AppConfig()

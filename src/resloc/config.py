"""Library configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from resloc.core.types import DEFAULT_USER_AGENT


class ResolocSettings(BaseSettings):
    """Default chain configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="RESLOC_",
    )

    # Bundled resources
    fallback_namespace: str = Field(
        default="META-INF",
        min_length=1,
        description="Prefix retried for bundled resources not found at the top level",
    )
    package_anchor: str | None = Field(
        default=None,
        description="Package whose resources are searched before sys.path",
    )

    # Local files
    local_fallback_paths: list[str] = Field(
        default_factory=list,
        description="Directories retried for local files not found as given",
    )

    # Remote
    remote_enabled: bool = Field(
        default=True,
        description="Append the remote URL loader to the default chain",
    )
    remote_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Remote connect/read timeout in seconds",
    )
    remote_proxy: str | None = Field(
        default=None,
        description="Proxy URL for remote lookups",
    )
    remote_follow_redirects: bool = Field(
        default=True,
        description="Follow HTTP redirects during remote lookups",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent by the remote loader",
    )


@lru_cache
def get_settings() -> ResolocSettings:
    """Get cached settings instance."""
    return ResolocSettings()

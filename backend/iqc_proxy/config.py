"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - One Settings instance per process, built at startup and passed into create_app()
    - Handlers read settings from app.state, never from os.environ
    - A missing upstream URL is a request-time failure, not a startup failure
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - AliasChoices keep the legacy Node variable names (GOOGLE_SCRIPT_URL, PORT,
      CORS_ORIGIN, NODE_ENV) working for existing deployments
    - resolve_upstream_url() returns Result instead of raising (ADR: config
      failures surface at the handler boundary only)
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from iqc_proxy.core.errors import ConfigurationError
from iqc_proxy.core.result import Result

UPSTREAM_URL_SETTING = "UPSTREAM_BASE_URL"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, populate_by_name=True,
        extra="ignore",
    )

    # Upstream script service
    upstream_base_url: str = Field(
        "", validation_alias=AliasChoices("upstream_base_url", "google_script_url"),
    )
    upstream_timeout_seconds: float = 30.0
    upstream_user_agent: str = "IQC-Proxy-Server/1.0"

    @field_validator("upstream_base_url", mode="before")
    @classmethod
    def strip_upstream_url(cls, v):
        """Whitespace-only values count as unset."""
        return v.strip() if isinstance(v, str) else v

    # Listener
    listen_host: str = "0.0.0.0"
    listen_port: int = Field(
        10000, validation_alias=AliasChoices("listen_port", "port"),
    )

    # API
    cors_allow_origin: str = Field(
        "*", validation_alias=AliasChoices("cors_allow_origin", "cors_origin"),
    )
    runtime_env: str = Field(
        "production", validation_alias=AliasChoices("runtime_env", "node_env"),
    )
    app_version: str = "1.0.0"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def resolve_upstream_url(self) -> Result[str, ConfigurationError]:
        if not self.upstream_base_url:
            return Result.err(ConfigurationError(UPSTREAM_URL_SETTING))
        return Result.ok(self.upstream_base_url)


@lru_cache
def get_settings() -> Settings:
    return Settings()

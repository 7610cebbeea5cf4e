from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ocloud.exceptions import ConfigError


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "ocloud"
    env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    # Transport settings for FastMCP: "stdio" (default), "http", or "sse"
    transport: Literal["stdio", "http", "sse"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000


class TenancyConfig(BaseModel):
    """Display context for the tenancy and compartment being browsed."""

    tenancy_name: Optional[str] = None
    compartment_name: Optional[str] = None
    region: Optional[str] = None


class ListingConfig(BaseModel):
    """Defaults applied by callers before paginating a listing."""

    default_limit: int = Field(default=20, gt=0)
    default_page: int = Field(default=1, gt=0)


class SearchConfig(BaseModel):
    """Tunable knobs for pattern classification and fuzzy matching."""

    specific_min_length: int = Field(default=15, gt=0)
    identifier_min_length: int = Field(default=8, gt=0)
    identifier_min_segments: int = Field(default=3, gt=1)
    fuzzy_prefix_length: int = Field(default=1, ge=0)
    ngram_min: int = Field(default=2, gt=0)
    ngram_max: int = Field(default=20, gt=0)
    boost_factor: float = Field(default=1.8, gt=1.0)


class ExportConfig(BaseModel):
    """Where resource exports (OCI CLI JSON output) are read from."""

    directory: str = "exports"
    base_url: Optional[str] = None  # e.g. "https://exports.internal/ocloud"
    token: Optional[str] = None
    timeout: float = 30.0
    verify_ssl: bool = True


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="OCLOUD_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    tenancy: TenancyConfig = TenancyConfig()
    listing: ListingConfig = ListingConfig()
    search: SearchConfig = SearchConfig()
    export: ExportConfig = ExportConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only.

    Raises
    ------
    ConfigError
        If a configured value fails validation.
    """
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ConfigError(f"Invalid ocloud configuration: {exc}") from exc

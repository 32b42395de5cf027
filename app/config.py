"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_EXPO_PUSH_URL = "https://exp.host/--/api/v2/push/send"
DEFAULT_GOHIGHLEVEL_API_BASE = "https://services.leadconnectorhq.com"
DEFAULT_GOHIGHLEVEL_API_VERSION = "2021-07-28"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to reach the profile store",
        min_length=1,
    )
    app_timezone: str = Field(
        default="America/Chicago",
        description="Timezone used to render dates inside notification bodies",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Origins allowed to call the API from a browser",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every outbound provider request",
        gt=0,
    )
    expo_push_url: str = Field(
        default=DEFAULT_EXPO_PUSH_URL,
        description="Endpoint of the Expo push delivery API",
    )
    expo_access_token: str | None = Field(
        default=None,
        description="Optional Expo access token sent as a bearer credential",
    )
    gohighlevel_api_key: str | None = Field(
        default=None,
        description="GoHighLevel private integration key; CRM sync is skipped when unset",
    )
    gohighlevel_location_id: str | None = Field(
        default=None,
        description="GoHighLevel location (sub-account) identifier",
    )
    gohighlevel_api_base: str = Field(
        default=DEFAULT_GOHIGHLEVEL_API_BASE,
        description="Base URL of the LeadConnector REST API",
    )
    gohighlevel_api_version: str = Field(
        default=DEFAULT_GOHIGHLEVEL_API_VERSION,
        description="Value sent in the ``Version`` header of every CRM request",
    )
    gohighlevel_webhook_url: str | None = Field(
        default=None,
        description="Inbound workflow webhook that receives lifecycle events",
    )

    @model_validator(mode="after")
    def _validate_gohighlevel_pair(self) -> "Settings":
        if bool(self.gohighlevel_api_key) ^ bool(self.gohighlevel_location_id):
            raise ValueError(
                "GOHIGHLEVEL_API_KEY and GOHIGHLEVEL_LOCATION_ID must both be provided to enable CRM sync"
            )
        return self

    @property
    def crm_configured(self) -> bool:
        """Return ``True`` when the CRM credentials are available."""

        return bool(self.gohighlevel_api_key and self.gohighlevel_location_id)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]

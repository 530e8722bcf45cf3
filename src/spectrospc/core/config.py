"""Centralized application settings using pydantic-settings.

All environment variable reads are consolidated here. Import
`get_settings` from this module rather than reading os.environ directly.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All env vars are prefixed with SPECTROSPC_ (case-insensitive).
    """

    model_config = SettingsConfigDict(
        env_prefix="SPECTROSPC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_version: str = "0.1.0"

    # Logging
    log_format: str = "console"
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:9002"

    # Possible-causes suggestion service (empty URL disables it)
    suggestion_url: str = ""
    suggestion_api_key: str = ""
    suggestion_timeout: float = 30.0

    # strftime format for times in out-of-control descriptions
    time_format: str = "%H:%M:%S"

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the cached application settings singleton."""
    return Settings()

"""Client configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="ODATAKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Service
    service_url: str = Field(
        default="https://services.odata.org/V3/OData/OData.svc",
        description="OData service root URL",
    )
    metadata_path: str = Field(
        default="$metadata",
        description="Path of the metadata document relative to the service root",
    )
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")

    # Application
    log_level: str = Field(default="WARNING", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

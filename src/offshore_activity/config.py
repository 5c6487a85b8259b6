"""Runtime configuration for the Offshore Activity Classification System."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Record linkage windows (days either side of the voyage start)
    manifest_window_days: float = Field(
        default=2,
        ge=0,
        validation_alias="OFFSHORE_MANIFEST_WINDOW_DAYS"
    )
    voyage_event_window_days: float = Field(
        default=7,
        ge=0,
        validation_alias="OFFSHORE_EVENT_WINDOW_DAYS"
    )
    bulk_action_window_days: float = Field(
        default=3,
        ge=0,
        validation_alias="OFFSHORE_BULK_WINDOW_DAYS"
    )

    # Duplicate detection
    no_voyage_sample_limit: int = Field(
        default=10,
        ge=0,
        validation_alias="OFFSHORE_NO_VOYAGE_SAMPLE_LIMIT"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        validation_alias="OFFSHORE_LOG_LEVEL"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global _settings
    _settings = Settings()
    return _settings

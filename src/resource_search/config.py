"""Settings for the ambient stack (logging and tracing) using Pydantic Settings.

The search algorithm itself has no knobs: its caps, boosts and fuzziness are
fixed constants in ``resource_search.search.engine``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``RESOURCE_SEARCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RESOURCE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    log_level: str = Field(default="info", description="Root logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")
    logger_levels: dict[str, str] = Field(
        default_factory=dict,
        description="Per-logger level overrides, e.g. {\"resource_search.search\": \"debug\"}",
    )
    tracing_enabled: bool = Field(default=False, description="Install an OpenTelemetry SDK tracer provider")
    service_name: str = Field(default="resource-search", min_length=1, description="OpenTelemetry service name")


_settings_holder: dict[str, Settings | None] = {"settings": None}


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    if _settings_holder["settings"] is None:
        _settings_holder["settings"] = Settings()
    return _settings_holder["settings"]


def reset_settings() -> None:
    """Forget cached settings (used by tests after changing the environment)."""
    _settings_holder["settings"] = None

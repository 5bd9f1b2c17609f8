from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from hostsift.exceptions import ConfigError


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "hostsift"
    log_level: str = "INFO"
    # Rank the filtered host list by fuzzy score instead of file order
    sort_by_score: bool = True
    # Fields the search query is matched against: "name" only, or "all"
    search_mode: Literal["name", "all"] = "name"
    # Pre-select "Yes" when the delete prompt opens
    confirm_by_default: bool = False


class DatabaseConfig(BaseModel):
    """Database configuration values."""

    url: str = "sqlite:///~/.local/share/hostsift/hosts.db"


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="HOSTSIFT_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    database: DatabaseConfig = DatabaseConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ConfigError(f"Invalid hostsift settings: {exc}") from exc

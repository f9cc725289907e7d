"""Configuration settings for Job-Recs."""

from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Paths
    data_path: Path = Field(
        default=Path("./data/jobboard.yaml"),
        description="YAML/JSON document holding the job board's jobs and applications",
    )
    profile_path: Path = Field(
        default=Path("profiles/profile.yaml"),
        description="Path to the user profile file (YAML/JSON)",
    )

    # Ranking
    default_limit: Annotated[int, Field(gt=0)] = Field(
        default=10,
        description="Number of recommendations returned when no limit is given",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("data_path", "profile_path", mode="after")
    @classmethod
    def expand_home(cls, v: Path) -> Path:
        """Expand a leading ~ so paths from .env files behave like shell paths."""
        return v.expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


# Singleton instance for easy import
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None

import logging
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from player_events.exceptions import ConfigurationException
from player_events.logging_config import DEFAULT_BACKUP_COUNT, DEFAULT_MAX_BYTES, setup_logging

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Library settings with validation.

    Values are read from ``PLAYER_EVENTS_*`` environment variables or a
    ``.env`` file in the working directory. Every field has a default, so an
    empty environment yields console-only INFO logging.
    """

    log_level: str = Field(default="INFO", description="Root log level")
    log_file: Path | None = Field(default=None, description="JSON log file path (console only when unset)")
    log_max_bytes: int = Field(default=DEFAULT_MAX_BYTES, gt=0, description="Rotate the JSON log after this size")
    log_backup_count: int = Field(default=DEFAULT_BACKUP_COUNT, ge=0, description="Rotated JSON logs to keep")

    model_config = SettingsConfigDict(
        env_prefix="PLAYER_EVENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v


# Singleton settings instance
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get the cached Settings instance.

    Returns:
        Cached Settings instance

    Raises:
        ConfigurationException: If the environment holds invalid values
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            _settings_instance = Settings()
        except ValidationError as e:
            raise ConfigurationException(
                "Invalid player events settings",
                details={"errors": e.errors(include_url=False)},
            ) from e
    return _settings_instance


def setup_logging_from_settings(settings: Settings | None = None) -> logging.Logger:
    """Apply logging settings to the root logger.

    Args:
        settings: Settings instance (defaults to singleton)

    Returns:
        Configured root logger instance
    """
    if settings is None:
        settings = get_settings()
    return setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

"""Builder settings loaded from the environment."""

import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "ffmpeg_fluent"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BuilderSettings(BaseSettings):
    """Settings for command building, read from FFMPEG_FLUENT_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="FFMPEG_FLUENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Binary placed first by generate_command()
    ffmpeg_path: str = "ffmpeg"
    # Directory searched for <name>.py preset modules before the built-in presets
    presets_dir: Optional[str] = None
    log_level: str = "INFO"


# In-memory cache of settings
_cached_settings: Optional[BuilderSettings] = None


def get_settings() -> BuilderSettings:
    """Get the current builder settings, loading them on first use."""
    global _cached_settings

    if _cached_settings is None:
        _cached_settings = BuilderSettings()
        logger.debug(
            "Loaded builder settings: ffmpeg_path=%s presets_dir=%s",
            _cached_settings.ffmpeg_path, _cached_settings.presets_dir,
        )
    return _cached_settings


def clear_settings_cache() -> None:
    """Clear the cached settings (forces reload)."""
    global _cached_settings
    _cached_settings = None


def set_log_level(level: Optional[str] = None) -> None:
    """Set the level of the package logger, defaulting to the configured one."""
    level_upper = (level or get_settings().log_level).upper()

    if level_upper not in VALID_LOG_LEVELS:
        logger.warning("Invalid log level '%s', using INFO", level)
        level_upper = "INFO"

    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, level_upper))

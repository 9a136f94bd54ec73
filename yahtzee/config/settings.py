"""
Yahtzee Duel - Application Settings

Loads configuration from environment variables (``YAHTZEE_`` prefix) and an
optional ``.env`` file using Pydantic Settings.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Ranking
    ranking_path: Path = Path("highscores.txt")
    ranking_display_limit: int = Field(default=10, ge=1)

    # AI narration pacing (seconds)
    ai_rolling_delay: float = Field(default=0.8, ge=0)
    ai_rolled_delay: float = Field(default=1.0, ge=0)
    ai_chose_delay: float = Field(default=1.5, ge=0)

    # Application
    debug: bool = False
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="YAHTZEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Set the root log level from settings (DEBUG when debug is on)."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

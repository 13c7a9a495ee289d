"""Application configuration loaded from environment variables and .env file."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Simulation settings
    EVENT_LOG_MAX_EVENTS: int = 100
    RANDOM_SEED: Optional[int] = None
    SEED_DEMO_VILLAGERS: bool = False


settings = Settings()

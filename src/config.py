"""Application configuration loaded from environment variables and .env file."""

import random
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

    LOG_LEVEL: str = "INFO"

    # Pet settings
    PET_DEFAULT_NAME: str = "Buddy"
    MYSTERY_BOX_SEED: Optional[int] = None
    ACTIVITY_LOG_LIMIT: int = 50

    def make_rng(self) -> random.Random:
        """Random source for mystery boxes; seeded when MYSTERY_BOX_SEED is set."""
        return random.Random(self.MYSTERY_BOX_SEED)


settings = Settings()

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FAMTRACK_", env_file=".env", extra="ignore")
    DATABASE_URL: str = "sqlite:///./famtrack.db"

    # "strict" raises when a participant's total falls outside every tier
    TIER_MODE: Literal["lenient", "strict"] = "lenient"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None
    RECENT_LIMIT: int = 10
    LEADERBOARD_LIMIT: int = 5


settings = Settings()

"""Runtime settings, read from the environment and a local .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    DATABASE_URL: Optional[str] = None
    CORS_ORIGINS: str = "http://localhost:3000"  # comma-separated
    LOG_LEVEL: str = "INFO"
    DB_POOL_MIN_SIZE: int = 2
    DB_POOL_MAX_SIZE: int = 10
    APPLY_SCHEMA: bool = True  # run database/schema.sql at startup

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


def load_settings() -> Settings:
    return Settings()

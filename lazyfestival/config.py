"""
LazyFestival settings
"""

from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Project root
    BASE_DIR: Path = Path(__file__).parent.parent

    # Telegram
    bot_token: str = Field(default="")

    # Database
    database_url: str = Field(default="sqlite:///./data/lazyfestival.db")

    # Lineup
    lineup_file: Path = Field(default=Path("data.json"))
    lineup_year: int = Field(default=2024)
    lineup_timezone: str = Field(default="Europe/Zurich")

    # Scanner
    scan_interval_minutes: int = Field(default=3, ge=1)
    send_timeout_seconds: float = Field(default=10.0, gt=0)

    # Logging
    log_level: str = Field(default="INFO")


@lru_cache()
def get_settings() -> Settings:
    """Return the settings singleton"""
    return Settings()


settings = get_settings()

"""Environment-driven configuration helpers for GameSquares NBA."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ODDS_API_BASE_URL = "https://api.the-odds-api.com/v4/sports/basketball_nba/odds"
API_SPORTS_BASE_URL = "https://v1.basketball.api-sports.io"


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or .env files."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    odds_api_key: str = Field(default="", validation_alias="ODDS_API_KEY")
    odds_api_base_url: str = Field(default=ODDS_API_BASE_URL)
    odds_regions: str = Field(default="us")

    api_sports_key: str = Field(default="", validation_alias="API_SPORTS_KEY")
    api_sports_base_url: str = Field(default=API_SPORTS_BASE_URL)
    api_sports_season: str = Field(default="2024-2025")
    api_sports_league: str = Field(default="12")

    http_timeout: float = Field(default=30.0, gt=0.0)
    refresh_interval_seconds: int = Field(default=30, ge=1)
    background_refresh: bool = Field(default=True)
    log_level: str = Field(default="INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]

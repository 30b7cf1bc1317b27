from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "NCT Alignment Engine"
    debug: bool = False
    log_level: str = "INFO"  # ignored in debug mode, which always logs DEBUG

    # API
    frontend_url: str = "http://localhost:3000"
    cors_allowed_origins: list[str] = [
        "http://localhost:3000",
    ]

    # Scoring
    stale_narrative_days: int = 30  # env: STALE_NARRATIVE_DAYS
    custom_cycle_length_days: int = 42  # env: CUSTOM_CYCLE_LENGTH_DAYS


@lru_cache
def get_settings() -> Settings:
    return Settings()

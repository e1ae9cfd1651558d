# backend/tripgenius/core/config_loader.py

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # third-party keys (all optional; services fall back when missing)
    OPENWEATHER_API_KEY: str = ""
    EXCHANGERATE_API_KEY: str = ""
    OPENAI_API_KEY: str = ""
    gpt_model: str = "gpt-4.1-mini"

    JWT_SECRET_KEY: str = "dev_secret_change_me"
    JWT_ALGORITHM: str = "HS256"
    access_token_expire_minutes: int = 7 * 24 * 60

    storage_backend: str = "memory"     # memory | sqlite
    DB_PATH: str = "tripgenius.sqlite3"
    seed_demo_user: bool = True

    environment: str = "development"
    timezone: str = "UTC"
    ping_message: str = "ping"
    cors_origins: List[str] = ["*"]

    http_user_agent: str = "TripGenius/1.0 (builder.codes)"
    http_retries: int = 2
    http_timeout_seconds: float = 5.0
    http_backoff_seconds: float = 0.5

    weather_cache_ttl_seconds: int = 30 * 60
    currency_fallback_rate: float = 0.9

    collab_history_limit: int = 100
    collab_keepalive_seconds: float = 15.0

    log_dir: str = "logs"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()

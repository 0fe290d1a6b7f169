# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Postgres connection string)
      - JWT_SECRET (signing secret for session tokens)

    Optional:
      - ADMIN_EMAIL / ADMIN_PASSWORD (admin bootstrap pair)
      - SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY (object storage)
      - SMTP_* (outbound mail)
      - CORS_ORIGINS (explicit allow-list, JSON array)
    """

    PROJECT_NAME: str = "Elite Digital Cards API"
    API_PREFIX: str = "/api"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str

    # Session tokens
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Password reset
    OTP_EXPIRE_MINUTES: int = 5

    # Admin bootstrap credentials (checked out-of-band from the users table)
    ADMIN_EMAIL: str | None = None
    ADMIN_PASSWORD: str | None = None

    # Supabase Storage
    SUPABASE_URL: str | None = None
    SUPABASE_SERVICE_ROLE_KEY: str | None = None
    STORAGE_BUCKET: str = "elite-cards"

    # Outbound mail
    SMTP_HOST: str | None = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: str | None = None
    SMTP_PASSWORD: str | None = None
    SMTP_FROM_EMAIL: str = "noreply@elitedigitalcards.com"
    SMTP_FROM_NAME: str = "Elite Digital Cards"
    SMTP_USE_TLS: bool = True
    SMTP_USE_SSL: bool = False

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:5174",
        "http://127.0.0.1:5174",
        "https://www.elitedigitalcards.com",
        "https://elitedigitalcards.com",
        "https://www.elitedigitalcards.in",
        "https://elitedigitalcards.in",
        "https://elite-cards-admin-panel.vercel.app",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()

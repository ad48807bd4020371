"""
Centralized configuration for the admin console backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced (e.g., SUPABASE_*, SESSION_*, PREMIUM_*).
"""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Admin Console API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""

    # Remote collections
    accounts_table: str = "profiles"
    posts_table: str = "blogs"
    realtime_schema: str = "public"

    # Local admin session
    session_file: Path = Path(".admin_session.json")
    session_key: str = "adminSession"
    session_ttl_hours: int = 24

    # Subscriptions
    premium_period_days: int = 30
    premium_price: int = 9  # USD per premium account, display only

    # Posts
    excerpt_length: int = 150

    # Waiting for a new profile row after account creation
    profile_wait_timeout: float = 10.0  # seconds
    profile_poll_initial: float = 0.25  # seconds
    profile_poll_max: float = 2.0  # seconds

    # Notifications kept for the API
    notification_history: int = 50


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()

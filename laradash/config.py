"""
Application configuration using pydantic-settings.
Loads from environment variables with .env file support.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Site identity (used by email variables)
    app_name: str = "LaraDashboard"
    app_url: str = "http://localhost:8000"
    site_icon: str = "/images/logo/icon.png"
    mail_from_address: str = "no-reply@example.com"

    # Outgoing email composition
    email_from_email: str = ""
    email_from_name: str = ""
    email_reply_to_email: str = ""
    email_reply_to_name: str = ""
    email_utm_source_default: str = ""
    email_utm_medium_default: str = "email"

    # Markdown block fetching
    markdown_fetch_timeout: float = 30.0
    markdown_cache_ttl: int = 3600  # seconds
    markdown_user_agent: str = "LaraDashboard-Builder/1.0"

    # Modules
    modules_statuses_path: str = "modules_statuses.json"

    # Hooks: re-raise callback errors instead of logging and continuing
    hooks_strict: bool = False

    # Application
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR
    slow_request_ms: int = 1000  # requests slower than this are logged

    # API Settings
    api_v1_prefix: str = "/api/v1"
    project_name: str = "LaraDashboard Builder"
    version: str = "1.0.0"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

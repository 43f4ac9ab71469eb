"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Finance Tracker"
    app_env: str = "development"
    debug: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # API
    api_v1_prefix: str = "/app/v1"

    # Plaid (optional; without credentials the link flow runs in demo mode)
    plaid_client_id: str | None = None
    plaid_secret: str | None = None
    plaid_env: str = "sandbox"  # sandbox or production
    plaid_products: list[str] = ["transactions"]

    # Account linking
    demo_link_token: str = "link-sandbox-abc123"
    demo_link_delay_seconds: float = 0.5

    # Auth
    jwt_secret: str = "change-me"
    jwt_issuer: str = "finance-api"
    jwt_expiration_minutes: int = 60
    jwt_refresh_expiration_days: int = 7

    # Encryption
    encryption_key: str | None = None  # Fernet key for stored Plaid access tokens

    # Demo data
    seed_demo_data: bool = True

    # Logging
    log_dir: str = "logs"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def plaid_configured(self) -> bool:
        """Check if Plaid credentials are available."""
        return bool(self.plaid_client_id and self.plaid_secret)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Centralized configuration for the pizza service backend.

All settings are loaded from environment variables with sensible defaults.
Variables are prefixed with PIZZA_ (e.g., PIZZA_JWT_SECRET, PIZZA_FACTORY_URL).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PIZZA_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "JWT Pizza"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization"]

    # Authentication
    jwt_secret: str = "change-me"
    bcrypt_rounds: int = 12

    # Database
    database_url: str = "sqlite+aiosqlite:///./pizza.db"
    database_echo: bool = False
    list_per_page: int = 10

    # Pizza factory (order fulfillment)
    factory_url: str = "https://pizza-factory.cs329.click"
    factory_api_key: str = ""
    factory_timeout: float = 30.0

    # Default admin seeded at startup (empty email disables seeding)
    admin_name: str = "常用名字"
    admin_email: str = "a@jwt.com"
    admin_password: str = "admin"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()

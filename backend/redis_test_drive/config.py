"""
Configuration Management Module

Configures application parameters via environment variables or .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "Redis Features API"
    APP_DESCRIPTION: str = "Taking a test drive of the various Redis datatypes utilizing Python"
    APP_VERSION: str = "v1"
    DEBUG: bool = False

    # Server Config (only used when running the module directly)
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Route prefix shared by every namespace controller
    API_PREFIX: str = "/api"

    # Redis Config
    # The database component of the URL is ignored, each namespace selects its own database index
    REDIS_URL: str = "redis://localhost:6379"

    # CORS Config
    # Comma-separated list of allowed origins for CORS
    # Example: "http://localhost:5068,https://example.com"
    ALLOWED_ORIGINS: str = "http://localhost:5068"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parsed CORS allow-list, empty entries dropped"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get application configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()

"""Application configuration via Pydantic Settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # App
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Catalog snapshot (JSON with products/categories/orders/homeSections).
    # An empty string starts the service with an empty catalog.
    CATALOG_PATH: str = ""

    # Display caps
    SECTION_DISPLAY_LIMIT: int = 12
    TAB_DISPLAY_LIMIT: int = 8
    DEFAULT_TAB: str = "ON SALE"

    # Frontend
    FRONTEND_URL: str = "http://localhost:3000"

    @field_validator("SECTION_DISPLAY_LIMIT", "TAB_DISPLAY_LIMIT")
    @classmethod
    def check_limit(cls, value: int) -> int:
        if value < 1:
            raise ValueError("display limits must be at least 1")
        return value


settings = Settings()
